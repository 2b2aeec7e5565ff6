# =============================================================================
# core/services/intake_service.py - Submission Relay
# =============================================================================
# Builds the outgoing email for a validated submission and hands it to the
# email provider. One submission produces exactly one send call; there is
# no retry.
# =============================================================================

import logging
from typing import Protocol

from app.config import Settings
from app.exceptions import EmailDeliveryError
from core.models.application import JobApplication
from core.models.rider import RiderRegistration
from core.services.email_templates import (
    render_job_application_email,
    render_rider_registration_email,
)
from lib.resend_client import EmailAttachment, EmailMessage, ResendClientError

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "New Virgas Job Application"


class EmailSender(Protocol):
    """Anything that can deliver an EmailMessage and return its id."""

    async def send(self, message: EmailMessage) -> str: ...


class IntakeService:
    """
    Service for relaying form submissions as emails.

    Settings and the email client are passed in per call.
    """

    @staticmethod
    async def submit_job_application(
        application: JobApplication,
        settings: Settings,
        client: EmailSender,
    ) -> str:
        """
        Email a job application with the CV attached.

        Args:
            application: Validated application
            settings: Sender and recipient configuration
            client: Email provider client

        Returns:
            Provider message id

        Raises:
            EmailDeliveryError: If the provider rejects the send
        """
        message = EmailMessage(
            sender=settings.sender,
            to=settings.VIRGAS_EMAIL,
            subject=EMAIL_SUBJECT,
            html=render_job_application_email(application),
            attachments=[
                EmailAttachment(
                    filename=application.cv.filename,
                    content=application.cv.to_base64(),
                )
            ],
        )

        logger.info(
            f"Sending job application for role '{application.role}' "
            f"with CV {application.cv.filename} ({application.cv.size} bytes)"
        )
        return await IntakeService._send(client, message)

    @staticmethod
    async def submit_rider_registration(
        registration: RiderRegistration,
        settings: Settings,
        client: EmailSender,
    ) -> str:
        """
        Email a rider registration.

        Raises:
            EmailDeliveryError: If the provider rejects the send
        """
        message = EmailMessage(
            sender=settings.sender,
            to=settings.VIRGAS_EMAIL,
            subject=EMAIL_SUBJECT,
            html=render_rider_registration_email(registration),
        )

        logger.info("Sending rider registration")
        return await IntakeService._send(client, message)

    @staticmethod
    async def _send(client: EmailSender, message: EmailMessage) -> str:
        try:
            message_id = await client.send(message)
        except ResendClientError as e:
            logger.error(f"Error sending email: {e}")
            raise EmailDeliveryError(str(e), details=e.to_dict())

        logger.info(f"Email sent: {message_id}")
        return message_id
