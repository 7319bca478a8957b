"""
Unit tests for environment configuration and the DAL handler factory.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

import employee_service.dal as dal
from employee_service.handlers.models.env_vars import DEFAULT_TABLE_NAME, EmployeesHandlerEnvVars


class TestEmployeesHandlerEnvVars:
    """Test cases for the environment variable model."""

    def test_defaults(self):
        env_vars = EmployeesHandlerEnvVars()

        assert env_vars.TABLE_NAME == DEFAULT_TABLE_NAME == "employee"
        assert env_vars.AUTHORIZATION_ENABLED is True
        assert env_vars.DYNAMODB_ENDPOINT is None

    def test_authorization_flag_parsed_from_string(self):
        env_vars = EmployeesHandlerEnvVars(AUTHORIZATION_ENABLED="false")

        assert env_vars.AUTHORIZATION_ENABLED is False

    def test_table_name_defaulted(self):
        assert EmployeesHandlerEnvVars().table_name_defaulted is True
        assert EmployeesHandlerEnvVars(TABLE_NAME="employee").table_name_defaulted is False

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            EmployeesHandlerEnvVars(LOG_LEVEL="VERBOSE")


class TestGetDalHandler:
    """Test cases for the lazily created DAL handler."""

    def test_handler_is_reused(self):
        with patch("employee_service.dal.db_handler.DynamoDbHandler") as handler_cls:
            first = dal.get_dal_handler()
            second = dal.get_dal_handler()

        assert first is second
        handler_cls.assert_called_once()

    def test_warns_when_table_name_unset(self, monkeypatch):
        monkeypatch.delenv("TABLE_NAME", raising=False)
        defaults = EmployeesHandlerEnvVars()

        with patch("employee_service.dal.get_handler_env_vars", return_value=defaults), \
                patch("employee_service.dal.db_handler.DynamoDbHandler") as handler_cls, \
                patch.object(dal.logger, "warning") as warning:
            dal.get_dal_handler()

        warning.assert_called_once()
        handler_cls.assert_called_once_with("employee", endpoint_url=None)

    def test_no_warning_when_table_name_set(self):
        with patch("employee_service.dal.db_handler.DynamoDbHandler"), \
                patch.object(dal.logger, "warning") as warning:
            dal.get_dal_handler()

        warning.assert_not_called()
