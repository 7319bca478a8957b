"""
Employees Handler - Lambda function for the employee CRUD API.

This module is the single entry point behind an API Gateway HTTP API. It
answers CORS preflight requests, resolves the caller identity from the JWT
authorizer claims, routes the request to one of the employee route handlers,
and shapes every outcome into a JSON response with CORS headers.
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from aws_lambda_powertools.utilities.typing import LambdaContext

from employee_service.dal import get_dal_handler
from employee_service.handlers.models.env_vars import get_handler_env_vars
from employee_service.handlers.utils.errors import (
    BaseServiceError,
    EndpointNotFoundError,
    UnauthorizedError,
    create_api_response,
    format_error_response,
    get_http_status_code,
    handle_service_errors,
    is_conditional_check_failure,
)
from employee_service.handlers.utils.observability import logger, metrics, tracer
from employee_service.handlers.utils.router import HandlerResult, RequestContext, Router
from employee_service.logic.employee_service import EmployeeService

EMPLOYEES_PATH = '/employees'
EMPLOYEE_PATH = '/employees/{id}'

router = Router()


def _service() -> EmployeeService:
    return EmployeeService(get_dal_handler())


@router.post(EMPLOYEES_PATH)
@handle_service_errors
def create_employee(request: RequestContext) -> HandlerResult:
    employee = _service().create_employee(request.body, user_id=request.user_id)
    logger.info("Employee created", extra={"employee_id": employee.employee_id})
    return HandlerResult(
        status_code=201,
        body=employee.to_item(),
        headers={"Location": f"{EMPLOYEES_PATH}/{employee.employee_id}"},
    )


@router.get(EMPLOYEES_PATH)
@handle_service_errors
def list_employees(request: RequestContext) -> HandlerResult:
    employees = _service().list_employees(user_id=request.user_id)
    return HandlerResult(status_code=200, body=[employee.to_item() for employee in employees])


@router.get(EMPLOYEE_PATH)
@handle_service_errors
def get_employee(request: RequestContext) -> HandlerResult:
    employee_id = request.path_params['id']
    tracer.put_annotation("employee_id", employee_id)
    employee = _service().get_employee(employee_id, user_id=request.user_id)
    return HandlerResult(status_code=200, body=employee.to_item())


@router.put(EMPLOYEE_PATH)
@handle_service_errors
def update_employee(request: RequestContext) -> HandlerResult:
    employee_id = request.path_params['id']
    tracer.put_annotation("employee_id", employee_id)
    employee = _service().update_employee(employee_id, request.body, user_id=request.user_id)
    return HandlerResult(status_code=200, body=employee.to_item())


@router.delete(EMPLOYEE_PATH)
@handle_service_errors
def delete_employee(request: RequestContext) -> HandlerResult:
    employee_id = request.path_params['id']
    tracer.put_annotation("employee_id", employee_id)
    _service().delete_employee(employee_id, user_id=request.user_id)
    return HandlerResult(status_code=204, body={})


def extract_user_id(event: APIGatewayProxyEventV2) -> Optional[str]:
    """Return the 'sub' claim placed on the request by the gateway JWT authorizer, if any."""
    authorizer = event.get('requestContext', {}).get('authorizer') or {}
    claims = (authorizer.get('jwt') or {}).get('claims') or {}
    sub = claims.get('sub')
    if isinstance(sub, str) and sub:
        return sub
    return None


def parse_body(event: APIGatewayProxyEventV2) -> Any:
    """
    Decode the JSON request body.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    if not event.body:
        return None
    return json.loads(event.decoded_body)


def _error_response(error: BaseServiceError, request_id: Optional[str]) -> Dict[str, Any]:
    return create_api_response(
        status_code=get_http_status_code(error),
        body=format_error_response(error),
        request_id=request_id,
    )


def dispatch(event: APIGatewayProxyEventV2, request_id: Optional[str] = None, authorization_enabled: bool = True) -> Dict[str, Any]:
    """
    Serve one API Gateway HTTP API request.

    Args:
        event: API Gateway payload format 2.0 event
        request_id: Lambda request ID echoed in the X-Request-ID header
        authorization_enabled: Require a caller identity and enforce record ownership

    Returns:
        API Gateway response dictionary
    """
    method = event.request_context.http.method
    path = event.raw_path

    if method == 'OPTIONS':
        return create_api_response(status_code=204, body={}, request_id=request_id)

    user_id = None
    if authorization_enabled:
        user_id = extract_user_id(event)
        if user_id is None:
            logger.warning("Request rejected - missing caller identity", extra={"method": method, "path": path})
            return _error_response(UnauthorizedError(), request_id)
        logger.append_keys(user_id=user_id)

    try:
        body = parse_body(event)

        match = router.match(method, path)
        if match is None:
            return _error_response(EndpointNotFoundError(method, path), request_id)

        result = match.route.handler(RequestContext(path_params=match.params, body=body, user_id=user_id))

        log_fields = {"method": method, "path": path, "status": result.status_code}
        if authorization_enabled:
            log_fields["user_id"] = user_id
        logger.info("request_ok", extra=log_fields)
        metrics.add_metric(name="RequestSuccess", unit=MetricUnit.Count, value=1)

        return create_api_response(
            status_code=result.status_code,
            body=result.body,
            headers=result.headers,
            request_id=request_id,
        )

    except Exception as e:
        logger.exception("request_error", extra={"error": str(e), "method": method, "path": path})
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)

        if is_conditional_check_failure(e):
            status_code, error_body = 409, {"message": "Employee already exists", "error_code": "CONFLICT"}
        else:
            status_code, error_body = 500, {"message": "Server error", "error_code": "INTERNAL_SERVER_ERROR"}

        return create_api_response(status_code=status_code, body=error_body, request_id=request_id)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP, clear_state=True)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    env_vars = get_handler_env_vars()
    return dispatch(
        APIGatewayProxyEventV2(event),
        request_id=context.aws_request_id,
        authorization_enabled=env_vars.AUTHORIZATION_ENABLED,
    )
