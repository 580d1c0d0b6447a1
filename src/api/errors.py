"""Structured error response models for consistent API error handling."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response schema."""

    error: bool = True
    code: str
    message: str
    details: dict[str, Any] | None = None


def create_error_response(code: str, message: str, details: dict[str, Any] | None = None) -> ErrorResponse:
    """Create standardized error response."""
    return ErrorResponse(code=code, message=message, details=details)


def not_found(code: str, message: str, details: dict[str, Any] | None = None) -> JSONResponse:
    """Render an ErrorResponse as a 404 JSON response."""
    body = create_error_response(code=code, message=message, details=details)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())
