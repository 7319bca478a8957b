"""
Employee Service Module.

Serverless CRUD API for employee records, served by a single AWS Lambda
function behind an API Gateway HTTP API and stored in DynamoDB:

- handlers: Lambda entry point, routing and response shaping
- logic: Employee operations and ownership rules
- dal: Data access layer for DynamoDB
- models: Data models and schemas
"""

__version__ = "1.0.0"
__description__ = "Employee CRUD API on AWS Lambda and DynamoDB"

from employee_service.models.employee import Employee
from employee_service.models.input import CreateEmployeeRequest, UpdateEmployeeRequest

__all__ = [
    "Employee",
    "CreateEmployeeRequest",
    "UpdateEmployeeRequest",
]
