"""
Business Logic Layer for employee management.

Each operation issues its storage calls sequentially. When a ``user_id`` is
given, ownership is enforced: records are created with that owner and only
that owner may read, update or delete them. Without a ``user_id`` no
ownership checks are made.
"""

from typing import Any, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import ClientError

from employee_service.dal import DalHandler
from employee_service.handlers.utils.errors import (
    AccessDeniedError,
    EmployeeNotFoundError,
    is_conditional_check_failure,
)
from employee_service.handlers.utils.observability import logger, metrics, tracer
from employee_service.logic.validation import validate_create, validate_update
from employee_service.models.employee import Employee, utc_now


class EmployeeService:
    """Business logic service for employee management."""

    def __init__(self, dal: DalHandler) -> None:
        self.dal = dal

    @tracer.capture_method
    def create_employee(self, payload: Any, user_id: Optional[str] = None) -> Employee:
        """
        Create an employee from a request body.

        The ``clientToken`` of the body, when non-empty, becomes the employee ID so
        that a retried request is rejected instead of duplicated.

        Raises:
            EmployeeValidationError: If the body is invalid
            ClientError: ConditionalCheckFailedException if the ID already exists
        """
        request = validate_create(payload)
        employee = Employee.create(
            name=request.name,
            role=request.role,
            owner_id=user_id,
            employee_id=request.client_token,
        )

        created = self.dal.create_employee(employee)
        metrics.add_metric(name="EmployeeCreated", unit=MetricUnit.Count, value=1)
        return created

    @tracer.capture_method
    def list_employees(self, user_id: Optional[str] = None) -> List[Employee]:
        return self.dal.scan_employees(owner_id=user_id)

    @tracer.capture_method
    def get_employee(self, employee_id: str, user_id: Optional[str] = None) -> Employee:
        """
        Raises:
            EmployeeNotFoundError: If no employee has this ID
            AccessDeniedError: If the employee exists but is owned by another caller
        """
        employee = self.dal.get_employee(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        if user_id is not None and employee.owner_id != user_id:
            raise AccessDeniedError(employee_id, user_id)
        return employee

    @tracer.capture_method
    def update_employee(self, employee_id: str, payload: Any, user_id: Optional[str] = None) -> Employee:
        """
        Overwrite the supplied name and/or role of an employee.

        With ownership enforced, a separate read first checks existence and owner;
        the conditional write repeats both checks atomically, so a record deleted
        or re-owned between the two calls is still reported as not found.

        Raises:
            EmployeeValidationError: If neither name nor role is a string
            EmployeeNotFoundError: If the employee is missing or, with ownership enforced, not owned
            ClientError: ConditionalCheckFailedException if the employee is missing and ownership is not enforced
        """
        request = validate_update(payload)

        if user_id is not None:
            existing = self.dal.get_employee(employee_id)
            if existing is None or existing.owner_id != user_id:
                raise EmployeeNotFoundError(employee_id)

        try:
            updated = self.dal.update_employee(
                employee_id,
                changes=request.changes(),
                updated_at=utc_now(),
                owner_id=user_id,
            )
        except ClientError as e:
            if user_id is not None and is_conditional_check_failure(e):
                logger.warning('Employee changed between ownership check and update', extra={'employee_id': employee_id})
                raise EmployeeNotFoundError(employee_id)
            raise

        metrics.add_metric(name="EmployeeUpdated", unit=MetricUnit.Count, value=1)
        return updated

    @tracer.capture_method
    def delete_employee(self, employee_id: str, user_id: Optional[str] = None) -> None:
        """
        Raises:
            EmployeeNotFoundError: If, with ownership enforced, the employee is missing or not owned
            ClientError: ConditionalCheckFailedException if the employee is missing and ownership is not enforced
        """
        try:
            self.dal.delete_employee(employee_id, owner_id=user_id)
        except ClientError as e:
            if user_id is not None and is_conditional_check_failure(e):
                raise EmployeeNotFoundError(employee_id)
            raise

        metrics.add_metric(name="EmployeeDeleted", unit=MetricUnit.Count, value=1)
