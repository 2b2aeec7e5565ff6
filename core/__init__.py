# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the submission logic:
# - models/: Pydantic schemas for form validation
# - services/: Email rendering and relay to the provider
#
# Code in this package never touches Request objects.
# This keeps the logic testable and reusable.
# =============================================================================
