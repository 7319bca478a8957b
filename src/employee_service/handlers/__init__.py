"""
AWS Lambda Handlers Module.

This module contains the Lambda function handler that serves as the entry
point for the employee API. It implements the handler layer of the
handler / logic / data access architecture:

1. Handler Layer (this module): Request/response handling, identity, routing
2. Logic Layer: Validation, ownership rules and timestamps
3. Data Access Layer: Conditional reads and writes against DynamoDB
"""

from employee_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
