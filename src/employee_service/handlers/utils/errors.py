"""
Error handling utilities for the employee API handlers.

This module defines the service error hierarchy, the mapping from errors to
HTTP status codes, and the helpers that turn results and errors into
API Gateway responses.
"""

import json
import uuid
from datetime import datetime, timezone
from enum import Enum
from functools import wraps
from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import ClientError

from employee_service.handlers.utils.observability import logger, metrics, tracer
from employee_service.handlers.utils.router import HandlerResult
from employee_service.models.output import ErrorOutput

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET,POST,PUT,DELETE,OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type,Authorization',
}

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    BUSINESS_LOGIC = "BUSINESS_LOGIC"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    SECURITY = "SECURITY"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_LOGIC,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.user_message = user_message or message
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class EmployeeValidationError(BaseServiceError):
    """Raised when a request payload fails validation."""

    def __init__(self, message: str, field_errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
        )
        self.field_errors = field_errors or []


class EmployeeNotFoundError(BaseServiceError):
    """Raised when no employee with the requested ID is visible to the caller."""

    def __init__(self, employee_id: str):
        super().__init__(
            message=f"Employee with ID '{employee_id}' not found",
            error_code="RESOURCE_NOT_FOUND",
            severity=ErrorSeverity.LOW,
            user_message="Employee not found",
        )
        self.employee_id = employee_id


class AccessDeniedError(BaseServiceError):
    """Raised when an employee exists but belongs to another caller."""

    def __init__(self, employee_id: str, user_id: str):
        super().__init__(
            message=f"User '{user_id}' does not own employee '{employee_id}'",
            error_code="ACCESS_DENIED",
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.SECURITY,
            user_message="Access denied",
        )
        self.employee_id = employee_id
        self.user_id = user_id


class UnauthorizedError(BaseServiceError):
    """Raised when the request carries no verified caller identity."""

    def __init__(self):
        super().__init__(
            message="Missing 'sub' claim in request authorizer context",
            error_code="UNAUTHORIZED",
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.SECURITY,
            user_message="Unauthorized",
        )


class EndpointNotFoundError(BaseServiceError):
    """Raised when no route matches the request method and path."""

    def __init__(self, method: str, path: str):
        super().__init__(
            message=f"No route for {method} {path}",
            error_code="ENDPOINT_NOT_FOUND",
            severity=ErrorSeverity.LOW,
            user_message="Endpoint not found",
        )


def is_conditional_check_failure(error: BaseException) -> bool:
    """Return True when a DynamoDB conditional write was rejected."""
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code') == CONDITIONAL_CHECK_FAILED
    return CONDITIONAL_CHECK_FAILED in str(error)


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "VALIDATION_ERROR": 400,
        "UNAUTHORIZED": 401,
        "ACCESS_DENIED": 403,
        "RESOURCE_NOT_FOUND": 404,
        "ENDPOINT_NOT_FOUND": 404,
    }

    return status_mapping.get(error.error_code, 500)


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format error for API response."""

    output = ErrorOutput(message=error.user_message, error_code=error.error_code)

    # Add field errors for validation errors
    if isinstance(error, EmployeeValidationError) and error.field_errors:
        output.field_errors = error.field_errors

    return output.model_dump(exclude_none=True)


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="ServiceErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.warning(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_severity": error.severity.value,
            "error_category": error.category.value,
            "error_message": error.message,
        }
    )


def handle_service_errors(func):
    """Decorator turning service errors raised by a route handler into explicit results."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BaseServiceError as e:
            log_error_metrics(e)
            return HandlerResult(status_code=get_http_status_code(e), body=format_error_response(e))

    return wrapper


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response with CORS headers."""

    default_headers = {
        "Content-Type": "application/json",
        **CORS_HEADERS,
    }

    if request_id:
        default_headers["X-Request-ID"] = request_id

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else json.dumps(body, default=str),
    }
