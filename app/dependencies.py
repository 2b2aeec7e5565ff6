# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from lib.resend_client import ResendClient


def get_email_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ResendClient:
    """
    Build a Resend client from the current settings.

    Tests replace this through app.dependency_overrides.
    """
    return ResendClient(
        api_key=settings.RESEND_API_KEY,
        base_url=settings.RESEND_API_URL,
        timeout=settings.RESEND_TIMEOUT_SECONDS,
    )


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
EmailClientDep = Annotated[ResendClient, Depends(get_email_client)]
