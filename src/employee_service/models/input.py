"""
Input models for request validation using Pydantic.

This module defines the models produced by validating incoming employee
request bodies.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateEmployeeRequest(BaseModel):
    """Validated body of a create request."""

    model_config = ConfigDict(populate_by_name=True)

    name: Annotated[str, Field(
        strict=True,
        description='Employee name',
        examples=['Ada Lovelace']
    )]

    role: Annotated[Optional[str], Field(
        default=None,
        strict=True,
        description='Optional employee role',
        examples=['Engineer']
    )] = None

    client_token: Annotated[Optional[str], Field(
        default=None,
        strict=True,
        alias='clientToken',
        description='Idempotency token used as the employee ID',
        examples=['3f0c9a4e-retry-safe']
    )] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the name and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError('name is required')
        return v


class UpdateEmployeeRequest(BaseModel):
    """Validated body of an update request; only string fields are kept."""

    name: Annotated[Optional[str], Field(
        default=None,
        description='Updated employee name'
    )] = None

    role: Annotated[Optional[str], Field(
        default=None,
        description='Updated employee role'
    )] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Trim a supplied name and reject blank values."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError('name must not be blank')
        return v

    def changes(self) -> dict[str, str]:
        """Attributes to overwrite, keyed by stored attribute name."""
        return self.model_dump(exclude_none=True)
