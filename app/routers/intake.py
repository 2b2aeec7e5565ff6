# =============================================================================
# app/routers/intake.py - Form Intake Endpoints
# =============================================================================
# POST /riders     JSON rider registration
# POST /<other>    multipart job application with a PDF CV
#
# Both validate the body, render an HTML email and relay it through Resend.
# OPTIONS and non-POST methods never reach this router (see app/cors.py).
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from app.cors import CORS_HEADERS
from app.dependencies import EmailClientDep, SettingsDep
from app.exceptions import FormValidationError, SubmissionProcessingError
from core.models import (
    IntakeSuccess,
    JobApplication,
    RiderRegistration,
    flatten_validation_error,
)
from core.services.intake_service import IntakeService

logger = logging.getLogger(__name__)

router = APIRouter()

# Content types the job application form may be sent as
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

# Per-part limit for text answers (Starlette defaults to 1 MiB)
MAX_TEXT_PART_SIZE = 16 * 1024 * 1024


# =============================================================================
# Helper Functions
# =============================================================================

async def _read_upload(upload: UploadFile) -> dict[str, Any] | None:
    """Read an uploaded file part. Zero-byte parts count as missing."""
    content = await upload.read()
    if not content:
        return None

    data: dict[str, Any] = {
        "content_type": upload.content_type,
        "content": content,
    }
    if upload.filename:
        data["filename"] = upload.filename
    return data


async def _read_multipart(request: Request) -> dict[str, Any]:
    """Read every multipart field into memory, keeping the first value per key."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type not in FORM_CONTENT_TYPES:
        raise ValueError(f"Unsupported content type for form data: {content_type or 'none'}")

    fields: dict[str, Any] = {}

    async with request.form(max_part_size=MAX_TEXT_PART_SIZE) as form:
        for key, value in form.multi_items():
            if key in fields:
                continue
            if isinstance(value, UploadFile):
                upload = await _read_upload(value)
                if upload is not None:
                    fields[key] = upload
            else:
                fields[key] = value

    return fields


def _success_response() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content=IntakeSuccess().model_dump(),
        headers=CORS_HEADERS,
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/riders")
async def register_rider(
    request: Request,
    settings: SettingsDep,
    client: EmailClientDep,
):
    """
    Relay a rider registration.

    Returns 400 with field errors if the body fails validation.
    """
    logger.debug("Rider registration received")

    try:
        body = await request.json()
    except Exception as e:
        raise SubmissionProcessingError(request.url.path, str(e))

    try:
        registration = RiderRegistration.model_validate(body)
    except ValidationError as e:
        raise FormValidationError(flatten_validation_error(e))

    await IntakeService.submit_rider_registration(registration, settings, client)
    return _success_response()


@router.post("/{path:path}")
async def submit_job_application(
    path: str,
    request: Request,
    settings: SettingsDep,
    client: EmailClientDep,
):
    """
    Relay a job application with its CV attached.

    Accepts multipart form data on any path other than /riders:
    role, motivation, projects, message and a PDF `cv` of at most 2MB.
    """
    logger.debug(f"Job application received on /{path}")

    try:
        fields = await _read_multipart(request)
    except Exception as e:
        raise SubmissionProcessingError(request.url.path, str(e))

    try:
        application = JobApplication.from_form(fields)
    except ValidationError as e:
        raise FormValidationError(flatten_validation_error(e))

    await IntakeService.submit_job_application(application, settings, client)
    return _success_response()
