"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables used by the
employee API handler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field

DEFAULT_TABLE_NAME = 'employee'


class EmployeesHandlerEnvVars(BaseModel):
    """Environment variables for the employee API handler."""

    # DynamoDB table name for storing employees
    TABLE_NAME: Annotated[str, Field(
        default=DEFAULT_TABLE_NAME,
        description='DynamoDB table name for employee storage',
        min_length=1
    )] = DEFAULT_TABLE_NAME

    # Require a verified 'sub' claim and enforce record ownership
    AUTHORIZATION_ENABLED: Annotated[bool, Field(
        default=True,
        description='Enforce caller identity and record ownership (true/false)'
    )] = True

    # DynamoDB endpoint override, for DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override'
    )] = None

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='employee-service',
        description='Service name for AWS Powertools'
    )] = 'employee-service'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def table_name_defaulted(self) -> bool:
        """True when TABLE_NAME was not supplied and the default table is used."""
        return 'TABLE_NAME' not in self.model_fields_set


def get_handler_env_vars() -> EmployeesHandlerEnvVars:
    """
    Get typed environment variables for the handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=EmployeesHandlerEnvVars)
