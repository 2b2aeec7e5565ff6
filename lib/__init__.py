# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - resend_client.py: Async wrapper for the Resend email API
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.resend_client import (
    EmailAttachment,
    EmailMessage,
    ResendClient,
    ResendClientError,
)

__all__ = [
    "EmailAttachment",
    "EmailMessage",
    "ResendClient",
    "ResendClientError",
]
