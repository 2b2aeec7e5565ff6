# =============================================================================
# lib/resend_client.py - Resend Email API Client
# =============================================================================
# Thin async wrapper around the Resend HTTP API (POST /emails).
#
# The provider is treated as a black box: it accepts
# {from, to, subject, html, attachments?} and either returns a message id
# or an error body such as:
#   {"statusCode": 422, "name": "validation_error", "message": "..."}
#
# Usage:
#   client = ResendClient(api_key="re_...")
#   message_id = await client.send(EmailMessage(...))
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.resend.com"


class ResendClientError(Exception):
    """
    Error returned by, or while talking to, the Resend API.

    `details` holds the provider's error body when there is one.
    """

    def __init__(
        self,
        message: str,
        code: str = "RESEND_ERROR",
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.status_code is not None:
            result += f" (HTTP {self.status_code})"
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


# =============================================================================
# Request Models
# =============================================================================

class EmailAttachment(BaseModel):
    """An attachment with base64-encoded content."""
    filename: str
    content: str


class EmailMessage(BaseModel):
    """
    A send request in the provider's JSON shape.

    `sender` is serialized as `from`.
    """

    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: str | list[str]
    subject: str
    html: str
    attachments: list[EmailAttachment] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# Client
# =============================================================================

class ResendClient:
    """
    Async client for the Resend API.

    A new httpx.AsyncClient is opened per send; there is no state shared
    between requests. Pass `transport` to stub the network in tests.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ResendClientError(
                "Resend API key is missing",
                code="RESEND_NOT_CONFIGURED",
            )
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, message: EmailMessage) -> str:
        """
        Send one email.

        Args:
            message: The email to send

        Returns:
            The provider's message id

        Raises:
            ResendClientError: If the request fails or the provider rejects it
        """
        url = f"{self.base_url}/emails"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    json=message.to_payload(),
                    headers=self.headers,
                )
        except httpx.HTTPError as e:
            raise ResendClientError(
                f"Request to Resend failed: {e}",
                code="RESEND_UNAVAILABLE",
            ) from e

        body = _safe_json(response)

        if response.is_error:
            raise ResendClientError(
                str(body.get("message") or response.reason_phrase or "Unknown error"),
                code=str(body.get("name") or "RESEND_REJECTED"),
                status_code=response.status_code,
                details=body,
            )

        message_id = body.get("id")
        if not message_id:
            raise ResendClientError(
                "Resend response did not include a message id",
                code="RESEND_BAD_RESPONSE",
                status_code=response.status_code,
                details=body,
            )

        logger.debug(f"Resend accepted message {message_id}")
        return str(message_id)


def _safe_json(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, or return {} for anything else."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
