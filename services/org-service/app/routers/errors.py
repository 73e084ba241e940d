"""
Mapping from domain exceptions to HTTP errors.

NotFound maps to 404, configuration problems and unclassified failures
to 500, malformed input to 400.
"""

import structlog
from fastapi import HTTPException, status
from pydantic import BaseModel

from ..domain.exceptions import (
    ConfigurationException,
    NotFoundException,
    OrgServiceException,
    ValidationException,
)

logger = structlog.get_logger(__name__)


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    details: dict = {}


def error_code(exc: Exception) -> str:
    """Short machine-readable code for an exception, also used as metric outcome."""
    if isinstance(exc, ValidationException):
        return "validation_error"
    if isinstance(exc, NotFoundException):
        return "not_found"
    if isinstance(exc, ConfigurationException):
        return "configuration_error"
    return "internal_error"


def to_http_exception(exc: Exception) -> HTTPException:
    """
    Convert an exception raised while serving a request to an HTTPException.

    Args:
        exc: Exception raised by validation or by a service

    Returns:
        HTTPException carrying the error envelope
    """
    code = error_code(exc)

    if isinstance(exc, ValidationException):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, OrgServiceException):
        if isinstance(exc, ConfigurationException):
            logger.error("Hierarchy configuration error", error=exc.message, **exc.details)
        return HTTPException(
            status_code=status_code,
            detail={
                "success": False,
                "error": code,
                "message": exc.message,
                "details": exc.details,
            },
        )

    logger.error(f"Unexpected error: {exc}", exc_info=exc)
    return HTTPException(
        status_code=status_code,
        detail={
            "success": False,
            "error": code,
            "message": "An unexpected error occurred",
            "details": {},
        },
    )


ERROR_RESPONSES = {
    400: {"description": "Malformed identifier", "model": ErrorResponse},
    404: {"description": "Agent or designation not found", "model": ErrorResponse},
    500: {"description": "Hierarchy configuration or server error", "model": ErrorResponse},
}
