# =============================================================================
# core/models/application.py - Job Application Schemas
# =============================================================================
# These models define the contract for the job-application form:
# - CVAttachment: The uploaded CV (PDF only, at most 2 MiB)
# - JobApplication: The four text answers plus the CV
#
# The form arrives as multipart data. Empty text parts and empty file parts
# are treated as missing, so they fail with "Required" rather than a
# length error.
# =============================================================================

import base64
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

# CV upload limits
MAX_CV_SIZE_BYTES = 2 * 1024 * 1024
ALLOWED_CV_CONTENT_TYPE = "application/pdf"

# Message shown when a text answer is empty
TEXT_FIELD_MESSAGES: dict[str, str] = {
    "role": "Role is required",
    "motivation": "Motivation is required",
    "projects": "Please list some projects you've worked on before",
    "message": "Please provide reasons why you are a good fit for this role",
}


class CVAttachment(BaseModel):
    """
    An uploaded CV held in memory.

    Example:
        {
            "filename": "jane-doe.pdf",
            "content_type": "application/pdf",
            "content": b"%PDF-1.7 ..."
        }
    """

    filename: str = Field(
        default="cv.pdf",
        description="Original filename, reused as the attachment name"
    )

    content_type: str | None = Field(
        default=None,
        validate_default=True,
        description="Media type declared by the client"
    )

    content: bytes = Field(
        ...,
        description="Raw file bytes"
    )

    @field_validator("content")
    @classmethod
    def check_size(cls, v: bytes) -> bytes:
        if len(v) > MAX_CV_SIZE_BYTES:
            raise PydanticCustomError("file_too_large", "File size must be less than 2MB")
        return v

    @field_validator("content_type")
    @classmethod
    def check_content_type(cls, v: str | None) -> str | None:
        if v != ALLOWED_CV_CONTENT_TYPE:
            raise PydanticCustomError("invalid_file_type", "Only PDF files are allowed")
        return v

    @property
    def size(self) -> int:
        return len(self.content)

    def to_base64(self) -> str:
        """Encode the file content for the email provider."""
        return base64.b64encode(self.content).decode("ascii")


class JobApplication(BaseModel):
    """
    Schema for a job application submitted through the recruitment form.

    Example:
        {
            "role": "Backend Engineer",
            "motivation": "Growth",
            "projects": "Payments platform",
            "message": "I have shipped ...",
            "cv": {"filename": "cv.pdf", "content_type": "application/pdf", "content": b"..."}
        }
    """

    role: str = Field(..., description="Role being applied for")
    motivation: str = Field(..., description="Why the applicant wants the role")
    projects: str = Field(..., description="Projects the applicant has worked on")
    message: str = Field(..., description="Why the applicant is a good fit")
    cv: CVAttachment

    @field_validator("role", "motivation", "projects", "message")
    @classmethod
    def require_text(cls, v: str, info: ValidationInfo) -> str:
        if len(v) < 1:
            raise PydanticCustomError("too_short", TEXT_FIELD_MESSAGES[info.field_name])
        return v

    @classmethod
    def from_form(cls, fields: Mapping[str, Any]) -> "JobApplication":
        """
        Validate already-read multipart fields.

        Empty strings are dropped so the field reports as missing.

        Raises:
            pydantic.ValidationError: If any field is invalid
        """
        data = {
            key: value
            for key, value in fields.items()
            if not (isinstance(value, str) and value == "")
        }
        return cls.model_validate(data)

    def email_fields(self) -> dict[str, str]:
        """The text answers, without the CV."""
        return self.model_dump(include=set(TEXT_FIELD_MESSAGES))
