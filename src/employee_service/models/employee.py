"""
Employee domain model.

This module defines the Employee entity stored in DynamoDB and returned by the
API. Attribute names on the wire and in the table follow the stored item shape
(``ownerId``, ``createdAt``, ``updatedAt``); Python code uses snake_case.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision and a 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def new_employee_id() -> str:
    """Generate a time-ordered, lexicographically sortable employee ID."""
    return str(ULID())


class Employee(BaseModel):
    """Core Employee domain model."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "employee_id": "01HZX3J9Q4B5V6N7M8K9P0R1S2",
                "name": "Ada Lovelace",
                "role": "Engineer",
                "ownerId": "auth0|5f7c8ec7c33c6c004bbafe82",
                "createdAt": "2024-01-15T10:30:00.000Z",
                "updatedAt": "2024-01-15T10:30:00.000Z",
            }
        },
    )

    employee_id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the employee',
        examples=['01HZX3J9Q4B5V6N7M8K9P0R1S2']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Employee name',
        examples=['Ada Lovelace']
    )]

    role: Annotated[Optional[str], Field(
        default=None,
        description='Optional employee role',
        examples=['Engineer']
    )] = None

    owner_id: Annotated[Optional[str], Field(
        default=None,
        alias='ownerId',
        description='Identity of the caller that created the record'
    )] = None

    created_at: Annotated[str, Field(
        alias='createdAt',
        description='ISO timestamp when the employee was created'
    )]

    updated_at: Annotated[str, Field(
        alias='updatedAt',
        description='ISO timestamp when the employee was last updated'
    )]

    @classmethod
    def create(
        cls,
        name: str,
        role: Optional[str] = None,
        owner_id: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> 'Employee':
        """
        Create a new employee with matching creation and update timestamps.

        Args:
            name: Employee name, already validated
            role: Optional employee role
            owner_id: Caller identity when ownership is enforced
            employee_id: Caller-supplied ID; a ULID is generated when empty

        Returns:
            New Employee instance
        """
        now = utc_now()
        return cls(
            employee_id=employee_id or new_employee_id(),
            name=name,
            role=role,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )

    def to_item(self) -> Dict[str, Any]:
        """Stored/serialized representation; unset optional attributes are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'Employee':
        return cls.model_validate(item)
