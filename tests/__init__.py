# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Virgas intake API:
# - test_models.py: Unit tests for submission schema validation
# - test_email_templates.py: HTML body rendering and escaping
# - test_resend_client.py: Resend client against a mock transport
# - test_intake_service.py: Email construction and provider failures
# - test_intake_api.py: Endpoint tests through TestClient
#
# Run tests with: pytest
# =============================================================================
