"""
Service Models Package

This package contains the Pydantic models used throughout the service:
request models, response models, and the Employee domain model.
"""

from .employee import Employee
from .input import CreateEmployeeRequest, UpdateEmployeeRequest
from .output import ErrorOutput

__all__ = [
    # Input models
    "CreateEmployeeRequest",
    "UpdateEmployeeRequest",

    # Output models
    "ErrorOutput",

    # Domain models
    "Employee",
]
