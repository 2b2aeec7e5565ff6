# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - cors.py: CORS headers and the POST-only method guard
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# validation and email rendering to the core/ package.
# =============================================================================
