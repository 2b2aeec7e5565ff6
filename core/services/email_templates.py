# =============================================================================
# core/services/email_templates.py - HTML Email Bodies
# =============================================================================
# Pure functions that turn a validated submission into an HTML email body.
# Every interpolated value is HTML-escaped before it is embedded.
# =============================================================================

from html import escape

from core.models.application import JobApplication
from core.models.rider import RiderRegistration

_STYLE = """
        body { font-family: Arial, sans-serif; line-height: 1.6; }
        .container { max-width: 600px; margin: 0 auto; padding: 20px; }
        .header { background-color: #f4f4f4; padding: 10px; text-align: center; }
        .content { margin: 20px 0; }
        .footer { margin-top: 20px; font-size: 0.8em; color: #666; }
"""


def _layout(title: str, content: str, footer: str) -> str:
    return f"""
<!DOCTYPE html>
<html>
<head>
    <style>{_STYLE}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{title}</h1>
        </div>
        <div class="content">
{content}
        </div>
        <div class="footer">
            <p>{footer}</p>
        </div>
    </div>
</body>
</html>
"""


def render_job_application_email(application: JobApplication) -> str:
    """
    Render the recruitment email for a job application.

    The CV is sent as an attachment and is not part of the body.
    """
    fields = {key: escape(value) for key, value in application.email_fields().items()}

    content = (
        f"            <p><strong>Role:</strong> {fields['role']}</p>\n"
        f"            <p><strong>Motivation:</strong> {fields['motivation']}</p>\n"
        f"            <p><strong>Projects:</strong> {fields['projects']}</p>\n"
        f"            <p><strong>Message:</strong></p>\n"
        f"            <p>{fields['message']}</p>"
    )

    return _layout(
        title="New Application Received",
        content=content,
        footer="This email was sent from your virgasapp recruitment form.",
    )


def render_rider_registration_email(registration: RiderRegistration) -> str:
    """Render the notification email for a rider registration."""
    email = escape(registration.email) if registration.email else "Not provided"

    content = (
        f"            <p><strong>First name:</strong> {escape(registration.fname)}</p>\n"
        f"            <p><strong>Last name:</strong> {escape(registration.lname)}</p>\n"
        f"            <p><strong>Phone:</strong> {escape(registration.phone)}</p>\n"
        f"            <p><strong>Email:</strong> {email}</p>\n"
        f"            <p><strong>Gender:</strong> {escape(registration.gender)}</p>\n"
        f"            <p><strong>Date of birth:</strong> {escape(registration.DOB)}</p>"
    )

    return _layout(
        title="New Rider Registration",
        content=content,
        footer="This email was sent from your virgasapp rider registration form.",
    )
