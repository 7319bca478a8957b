"""
Request body validation for employee operations.
"""

from typing import Any

from pydantic import ValidationError

from employee_service.handlers.utils.errors import EmployeeValidationError
from employee_service.models.input import CreateEmployeeRequest, UpdateEmployeeRequest


def _field_errors(error: ValidationError) -> list[dict[str, str]]:
    return [{"field": str(item["loc"][-1]), "message": item["msg"]} for item in error.errors()]


def validate_create(payload: Any) -> CreateEmployeeRequest:
    """
    Validate a create request body.

    The name must be a string with at least one non-whitespace character; it is
    returned trimmed. The role is passed through unchanged.

    Raises:
        EmployeeValidationError: If the name is missing or blank, or another field has the wrong type
    """
    if not isinstance(payload, dict) or not isinstance(payload.get('name'), str) or not payload['name'].strip():
        raise EmployeeValidationError('name is required')

    try:
        return CreateEmployeeRequest.model_validate(payload)
    except ValidationError as e:
        raise EmployeeValidationError('Invalid employee payload', field_errors=_field_errors(e))


def validate_update(payload: Any) -> UpdateEmployeeRequest:
    """
    Validate an update request body, keeping only string-typed name and role.

    A supplied name follows the create rule: it is trimmed and must not be blank.

    Raises:
        EmployeeValidationError: If neither name nor role is a string, or the name is blank
    """
    if not isinstance(payload, dict):
        raise EmployeeValidationError('No fields to update')

    changes = {key: payload[key] for key in ('name', 'role') if isinstance(payload.get(key), str)}
    if not changes:
        raise EmployeeValidationError('No fields to update')

    try:
        return UpdateEmployeeRequest.model_validate(changes)
    except ValidationError as e:
        raise EmployeeValidationError('name is required', field_errors=_field_errors(e))
