# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for submission validation:
# - application.py: Job application form and CV attachment
# - rider.py: Rider registration body
# - responses.py: Response bodies and validation error flattening
#
# These models define the "contract" between the forms and the API.
# =============================================================================

# -----------------------------------------------------------------------------
# Job Application Models
# -----------------------------------------------------------------------------
from .application import (
    ALLOWED_CV_CONTENT_TYPE,
    MAX_CV_SIZE_BYTES,
    CVAttachment,
    JobApplication,
)

# -----------------------------------------------------------------------------
# Rider Models
# -----------------------------------------------------------------------------
from .rider import RiderRegistration

# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------
from .responses import (
    FlattenedErrors,
    IntakeFailure,
    IntakeSuccess,
    flatten_validation_error,
)

__all__ = [
    # Job application
    "ALLOWED_CV_CONTENT_TYPE",
    "MAX_CV_SIZE_BYTES",
    "CVAttachment",
    "JobApplication",
    # Rider
    "RiderRegistration",
    # Responses
    "FlattenedErrors",
    "IntakeFailure",
    "IntakeSuccess",
    "flatten_validation_error",
]
