"""
Business Logic Layer Module.

This module contains the employee operations that sit between the API
handlers and the data access layer: request validation, ownership rules and
timestamp management.
"""

from employee_service.logic.employee_service import EmployeeService
from employee_service.logic.validation import validate_create, validate_update

__all__ = [
    "EmployeeService",
    "validate_create",
    "validate_update",
]
