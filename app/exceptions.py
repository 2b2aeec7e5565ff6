# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the intake API.
# Every failure is converted to a JSON body at this boundary; nothing reaches
# the caller as a raw fault.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from app.cors import CORS_HEADERS
from core.models.responses import IntakeFailure

logger = logging.getLogger(__name__)

# Message returned for every send or unexpected failure
GENERIC_SEND_ERROR = "Failed to send email, please try again later."


class IntakeException(Exception):
    """
    Base exception for the intake API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTAKE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return IntakeFailure(error=self.message).model_dump(exclude_none=True)


# =============================================================================
# Submission Exceptions
# =============================================================================

class FormValidationError(IntakeException):
    """Raised when a submission fails schema validation."""

    def __init__(self, errors: dict[str, Any]):
        super().__init__(
            message="Validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
            details=errors,
        )

    def to_dict(self) -> dict[str, Any]:
        return IntakeFailure(errors=self.details).model_dump(exclude_none=True)


class EmailDeliveryError(IntakeException):
    """Raised when the email provider rejects or fails a send."""

    def __init__(self, error: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=GENERIC_SEND_ERROR,
            code="EMAIL_DELIVERY_ERROR",
            status_code=500,
            details={"error": error, **(details or {})},
        )


class SubmissionProcessingError(IntakeException):
    """Raised when the request body cannot be read or parsed."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=GENERIC_SEND_ERROR,
            code="SUBMISSION_PROCESSING_ERROR",
            status_code=500,
            details={"path": path, "error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def intake_exception_handler(
    request: Request,
    exc: IntakeException
) -> JSONResponse:
    """
    Convert IntakeException to JSON response.

    Provider details stay in `exc.details` and are only logged.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=CORS_HEADERS,
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle anything that escaped the request handler."""
    logger.exception(f"Error processing request: {exc}")
    return JSONResponse(
        status_code=500,
        content=IntakeFailure(error=GENERIC_SEND_ERROR).model_dump(exclude_none=True),
        headers=CORS_HEADERS,
    )
