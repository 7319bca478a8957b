"""
DynamoDB implementation of the Data Access Layer (DAL).

Every write carries a condition expression so that DynamoDB, not this code,
decides whether the write may happen. A rejected condition surfaces as a
botocore ``ClientError`` with code ``ConditionalCheckFailedException``.
"""

from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from employee_service.dal import SCAN_LIMIT
from employee_service.handlers.utils.errors import is_conditional_check_failure
from employee_service.handlers.utils.observability import logger, tracer
from employee_service.models.employee import Employee


class DynamoDbHandler:
    """DynamoDB implementation of the data access layer."""

    def __init__(self, table_name: str, endpoint_url: Optional[str] = None) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table, keyed by ``employee_id``
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name
        if endpoint_url:
            self.dynamodb = boto3.resource('dynamodb', endpoint_url=endpoint_url)
        else:
            self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)
        logger.debug(f'DynamoDB handler initialized for table: {table_name}')

    @tracer.capture_method
    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """
        Retrieve an employee by ID.

        Returns:
            Employee instance if found, None otherwise

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.get_item(Key={'employee_id': employee_id})
        except ClientError as e:
            logger.error(f'DynamoDB error retrieving employee {employee_id}: {e.response["Error"]["Code"]}')
            raise

        item = response.get('Item')
        if not item:
            logger.info(f'Employee not found: {employee_id}')
            return None

        tracer.put_annotation('employee_retrieved', employee_id)
        return Employee.from_item(item)

    @tracer.capture_method
    def create_employee(self, employee: Employee) -> Employee:
        """
        Store a new employee.

        Raises:
            ClientError: ConditionalCheckFailedException if the ID already exists
        """
        try:
            self.table.put_item(
                Item=employee.to_item(),
                ConditionExpression=Attr('employee_id').not_exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                logger.info(f'Employee already exists: {employee.employee_id}')
            else:
                logger.error(f'DynamoDB error creating employee: {e.response["Error"]["Code"]}')
            raise

        logger.info(f'Successfully created employee in database: {employee.employee_id}')
        tracer.put_annotation('employee_created', employee.employee_id)
        return employee

    @tracer.capture_method
    def update_employee(
        self,
        employee_id: str,
        changes: Dict[str, str],
        updated_at: str,
        owner_id: Optional[str] = None,
    ) -> Employee:
        """
        Overwrite the supplied attributes and refresh ``updatedAt``.

        Args:
            employee_id: ID of the employee to update
            changes: Attribute values to set, e.g. ``{'role': 'Manager'}``
            updated_at: New ``updatedAt`` timestamp
            owner_id: When given, the stored ``ownerId`` must equal it

        Returns:
            The employee as stored after the update

        Raises:
            ClientError: ConditionalCheckFailedException if the employee is missing or not owned
        """
        assignments: List[str] = []
        names: Dict[str, str] = {}
        values: Dict[str, Any] = {}
        for attribute, value in changes.items():
            names[f'#{attribute}'] = attribute
            values[f':{attribute}'] = value
            assignments.append(f'#{attribute} = :{attribute}')
        names['#updatedAt'] = 'updatedAt'
        values[':updatedAt'] = updated_at
        assignments.append('#updatedAt = :updatedAt')

        condition = Attr('employee_id').exists()
        if owner_id is not None:
            condition = condition & Attr('ownerId').eq(owner_id)

        try:
            response = self.table.update_item(
                Key={'employee_id': employee_id},
                UpdateExpression='SET ' + ', '.join(assignments),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ConditionExpression=condition,
                ReturnValues='ALL_NEW',
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                logger.info(f'Update precondition failed for employee: {employee_id}')
            else:
                logger.error(f'DynamoDB error updating employee {employee_id}: {e.response["Error"]["Code"]}')
            raise

        logger.info(f'Successfully updated employee: {employee_id}', extra={'fields': sorted(changes)})
        tracer.put_annotation('employee_updated', employee_id)
        return Employee.from_item(response['Attributes'])

    @tracer.capture_method
    def delete_employee(self, employee_id: str, owner_id: Optional[str] = None) -> None:
        """
        Delete an employee in a single conditional request.

        Raises:
            ClientError: ConditionalCheckFailedException if the employee is missing or not owned
        """
        condition = Attr('employee_id').exists()
        if owner_id is not None:
            condition = condition & Attr('ownerId').eq(owner_id)

        try:
            self.table.delete_item(
                Key={'employee_id': employee_id},
                ConditionExpression=condition,
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                logger.info(f'Delete precondition failed for employee: {employee_id}')
            else:
                logger.error(f'DynamoDB error deleting employee {employee_id}: {e.response["Error"]["Code"]}')
            raise

        logger.info(f'Successfully deleted employee: {employee_id}')
        tracer.put_annotation('employee_deleted', employee_id)

    @tracer.capture_method
    def scan_employees(self, owner_id: Optional[str] = None, limit: int = SCAN_LIMIT) -> List[Employee]:
        """
        Read up to ``limit`` items in a single scan request.

        With ``owner_id`` the scan is filtered server-side; DynamoDB applies the
        limit before the filter, so the result is not guaranteed to be complete.
        """
        scan_kwargs: Dict[str, Any] = {'Limit': limit}
        if owner_id is not None:
            scan_kwargs['FilterExpression'] = Attr('ownerId').eq(owner_id)

        try:
            response = self.table.scan(**scan_kwargs)
        except ClientError as e:
            logger.error(f'DynamoDB error scanning employees: {e.response["Error"]["Code"]}')
            raise

        employees = []
        for item in response.get('Items', []):
            try:
                employees.append(Employee.from_item(item))
            except ValueError as e:
                logger.warning(f'Failed to parse employee item: {e}', extra={'item': item})

        logger.info(f'Scanned {len(employees)} employees', extra={'owner_filter': owner_id is not None})
        tracer.put_annotation('employees_listed', len(employees))
        return employees
