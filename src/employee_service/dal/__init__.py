"""
Data Access Layer (DAL) for the employee service.

This module provides the data access layer interface and the factory that
hands out the process-wide storage handler.
"""

from typing import Optional, Protocol, runtime_checkable

from employee_service.handlers.models.env_vars import get_handler_env_vars
from employee_service.handlers.utils.observability import logger
from employee_service.models.employee import Employee

SCAN_LIMIT = 100


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Point lookup by ID."""
        ...

    def create_employee(self, employee: Employee) -> Employee:
        """Store a new employee unless the ID already exists."""
        ...

    def update_employee(
        self,
        employee_id: str,
        changes: dict[str, str],
        updated_at: str,
        owner_id: Optional[str] = None,
    ) -> Employee:
        """Overwrite the given attributes of an existing (and, with owner_id, owned) employee."""
        ...

    def delete_employee(self, employee_id: str, owner_id: Optional[str] = None) -> None:
        """Delete an existing (and, with owner_id, owned) employee."""
        ...

    def scan_employees(self, owner_id: Optional[str] = None, limit: int = SCAN_LIMIT) -> list[Employee]:
        """Bounded scan, optionally filtered to one owner."""
        ...


# Reused across invocations of a warm Lambda container, never mutated after creation
_dal_handler: Optional[DalHandler] = None


def get_dal_handler() -> DalHandler:
    """
    Get or create the process-wide DAL handler.

    Returns:
        DAL handler bound to the configured table
    """
    global _dal_handler

    if _dal_handler is None:
        # Import here to avoid circular imports
        from employee_service.dal.db_handler import DynamoDbHandler

        env_vars = get_handler_env_vars()
        if env_vars.table_name_defaulted:
            logger.warning('TABLE_NAME is not set, using default table name', extra={'table_name': env_vars.TABLE_NAME})
        _dal_handler = DynamoDbHandler(env_vars.TABLE_NAME, endpoint_url=env_vars.DYNAMODB_ENDPOINT)

    return _dal_handler


__all__ = [
    'DalHandler',
    'SCAN_LIMIT',
    'get_dal_handler',
]
