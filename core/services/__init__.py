# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .email_templates import (
    render_job_application_email,
    render_rider_registration_email,
)
from .intake_service import EMAIL_SUBJECT, IntakeService

__all__ = [
    "EMAIL_SUBJECT",
    "IntakeService",
    "render_job_application_email",
    "render_rider_registration_email",
]
