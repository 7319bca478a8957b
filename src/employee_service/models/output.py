"""
Output models for API responses using Pydantic.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field


class ErrorOutput(BaseModel):
    """Standard error response model."""

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['Employee not found', 'name is required', 'Server error']
    )]

    error_code: Annotated[str, Field(
        description='Machine-readable error code',
        examples=['RESOURCE_NOT_FOUND', 'VALIDATION_ERROR', 'INTERNAL_SERVER_ERROR']
    )]

    field_errors: Annotated[Optional[list[dict[str, str]]], Field(
        default=None,
        description='Per-field validation failures'
    )] = None
