# =============================================================================
# core/models/responses.py - Intake Response Schemas
# =============================================================================
# Response bodies returned by both intake endpoints, and the conversion of
# a pydantic ValidationError into the field-level error map sent on 400.
# =============================================================================

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError


class IntakeSuccess(BaseModel):
    """Returned with 200 once the provider accepted the email."""
    success: Literal[True] = True
    message: str = "Email sent successfully."


class IntakeFailure(BaseModel):
    """
    Returned with 400 or 500.

    `errors` is set for validation failures, `error` for everything else.
    """
    success: Literal[False] = False
    error: str | None = None
    errors: dict[str, Any] | None = None


class FlattenedErrors(BaseModel):
    """
    Field-level validation errors.

    Example:
        {
            "formErrors": [],
            "fieldErrors": {"cv": ["Required"], "role": ["Role is required"]}
        }
    """
    formErrors: list[str] = Field(default_factory=list)
    fieldErrors: dict[str, list[str]] = Field(default_factory=dict)


def flatten_validation_error(exc: ValidationError) -> dict[str, Any]:
    """
    Group validation messages by top-level field.

    Errors on nested locations (e.g. cv.content) are reported under the
    top-level field. Errors without a location (the body is not an object)
    go to formErrors.
    """
    flattened = FlattenedErrors()

    for error in exc.errors():
        message = "Required" if error["type"] == "missing" else error["msg"]
        loc = error.get("loc") or ()

        if not loc:
            flattened.formErrors.append(message)
            continue

        flattened.fieldErrors.setdefault(str(loc[0]), []).append(message)

    return flattened.model_dump()
