# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Virgas intake API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging

from fastapi import FastAPI, Request

from app.config import settings
from app.cors import cors_method_guard
from app.exceptions import (
    IntakeException,
    intake_exception_handler,
    unexpected_exception_handler,
)
from app.routers import intake

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title="Virgas Intake API",
    description="""
## Form Intake

Relays website form submissions to the Virgas inbox through Resend.

| Method | Path | Body |
|--------|------|------|
| POST | /riders | JSON rider registration |
| POST | any other path | multipart job application with a PDF `cv` |

```bash
curl -X POST http://localhost:8000/ \\
  -F role=Engineer -F motivation=Growth -F projects=X -F message=Y \\
  -F "cv=@cv.pdf;type=application/pdf"
```
""",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# =============================================================================
# Middleware
# =============================================================================

# Preflight answers and the POST-only guard
app.middleware("http")(cors_method_guard)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(IntakeException)
async def handle_intake_exception(request: Request, exc: IntakeException):
    """Handle validation, delivery and parse failures."""
    return await intake_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(intake.router)

logger.info(f"Virgas Intake API configured for {settings.ENVIRONMENT}")
