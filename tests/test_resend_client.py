# =============================================================================
# tests/test_resend_client.py - Resend Client Tests
# =============================================================================
# The network is replaced with httpx.MockTransport; no request leaves the
# process.
# =============================================================================

import asyncio
import json

import httpx
import pytest

from lib.resend_client import (
    EmailAttachment,
    EmailMessage,
    ResendClient,
    ResendClientError,
)


def _message(**overrides) -> EmailMessage:
    data = {
        "sender": "Virgas Hiring <hiring@virgas.test>",
        "to": "team@virgas.test",
        "subject": "New Virgas Job Application",
        "html": "<p>hi</p>",
    }
    data.update(overrides)
    return EmailMessage(**data)


def _client(handler) -> ResendClient:
    return ResendClient(
        api_key="re_test_key",
        base_url="https://api.resend.test/",
        transport=httpx.MockTransport(handler),
    )


# =============================================================================
# EmailMessage Tests
# =============================================================================

class TestEmailMessage:
    """Tests for the provider payload shape."""

    def test_sender_serialized_as_from(self):
        payload = _message().to_payload()

        assert payload["from"] == "Virgas Hiring <hiring@virgas.test>"
        assert "sender" not in payload

    def test_attachments_omitted_when_absent(self):
        assert "attachments" not in _message().to_payload()

    def test_attachments_included(self):
        payload = _message(
            attachments=[EmailAttachment(filename="cv.pdf", content="JVBERg==")]
        ).to_payload()

        assert payload["attachments"] == [{"filename": "cv.pdf", "content": "JVBERg=="}]

    def test_accepts_from_key(self):
        message = EmailMessage.model_validate({
            "from": "a@b.test",
            "to": "c@d.test",
            "subject": "s",
            "html": "h",
        })
        assert message.sender == "a@b.test"


# =============================================================================
# ResendClient Tests
# =============================================================================

class TestResendClient:
    """Tests for ResendClient.send."""

    def test_missing_api_key(self):
        with pytest.raises(ResendClientError) as exc_info:
            ResendClient(api_key="")

        assert exc_info.value.code == "RESEND_NOT_CONFIGURED"

    def test_successful_send(self):
        """Posts the payload with a bearer token and returns the id."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "49a3999c-0ce1"})

        message_id = asyncio.run(_client(handler).send(_message()))

        assert message_id == "49a3999c-0ce1"
        assert captured["url"] == "https://api.resend.test/emails"
        assert captured["auth"] == "Bearer re_test_key"
        assert captured["body"]["from"] == "Virgas Hiring <hiring@virgas.test>"
        assert captured["body"]["subject"] == "New Virgas Job Application"

    def test_provider_rejection(self):
        """Error bodies become ResendClientError with details."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={
                    "statusCode": 422,
                    "name": "validation_error",
                    "message": "Invalid `from` field.",
                },
            )

        with pytest.raises(ResendClientError) as exc_info:
            asyncio.run(_client(handler).send(_message()))

        error = exc_info.value
        assert error.status_code == 422
        assert error.code == "validation_error"
        assert error.message == "Invalid `from` field."
        assert error.details["statusCode"] == 422

    def test_non_json_error_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ResendClientError) as exc_info:
            asyncio.run(_client(handler).send(_message()))

        assert exc_info.value.status_code == 502
        assert exc_info.value.code == "RESEND_REJECTED"

    def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ResendClientError) as exc_info:
            asyncio.run(_client(handler).send(_message()))

        assert exc_info.value.code == "RESEND_UNAVAILABLE"

    def test_missing_id(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        with pytest.raises(ResendClientError) as exc_info:
            asyncio.run(_client(handler).send(_message()))

        assert exc_info.value.code == "RESEND_BAD_RESPONSE"
