# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Replaces the Resend client with an in-memory fake
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("RESEND_EMAIL", "<hiring@virgas.test>")
os.environ.setdefault("VIRGAS_EMAIL", "team@virgas.test")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.dependencies import get_email_client
from app.main import app
from lib.resend_client import EmailMessage, ResendClientError


# =============================================================================
# Fakes
# =============================================================================

class FakeEmailClient:
    """Records every message instead of calling Resend."""

    def __init__(self, error: Exception | None = None):
        self.sent: list[EmailMessage] = []
        self.error = error

    async def send(self, message: EmailMessage) -> str:
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return f"msg_{len(self.sent)}"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with fixed addresses, independent of the environment."""
    return Settings(
        RESEND_API_KEY="re_test_key",
        RESEND_EMAIL="<hiring@virgas.test>",
        VIRGAS_EMAIL="team@virgas.test",
    )


@pytest.fixture
def email_client():
    """A fake email client that accepts everything."""
    return FakeEmailClient()


@pytest.fixture
def failing_email_client():
    """A fake email client whose sends are rejected by the provider."""
    return FakeEmailClient(
        error=ResendClientError(
            "The `to` field is invalid",
            code="validation_error",
            status_code=422,
            details={"name": "validation_error", "message": "The `to` field is invalid"},
        )
    )


def _client_for(settings: Settings, email_client: FakeEmailClient, **kwargs):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_email_client] = lambda: email_client
    return TestClient(app, **kwargs)


@pytest.fixture
def client(test_settings, email_client):
    """TestClient wired to the accepting fake."""
    yield _client_for(test_settings, email_client)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(test_settings, failing_email_client):
    """TestClient wired to the rejecting fake."""
    yield _client_for(test_settings, failing_email_client)
    app.dependency_overrides.clear()


@pytest.fixture
def crashing_email_client():
    """A fake email client that fails with a non-provider error."""
    return FakeEmailClient(error=RuntimeError("socket closed: internal-host-17"))


@pytest.fixture
def crashing_client(test_settings, crashing_email_client):
    """TestClient that returns 500 responses instead of re-raising."""
    yield _client_for(test_settings, crashing_email_client, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def pdf_bytes():
    """A small PDF-looking payload."""
    return b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n%%EOF\n"


@pytest.fixture
def job_form():
    """Valid text fields for a job application."""
    return {
        "role": "Engineer",
        "motivation": "Growth",
        "projects": "X",
        "message": "Y",
    }


@pytest.fixture
def rider_body():
    """Valid rider registration body."""
    return {
        "phone": "0700000000",
        "gender": "female",
        "DOB": "1990-01-01",
        "fname": "Jane",
        "lname": "Doe",
    }
