# =============================================================================
# core/models/rider.py - Rider Registration Schema
# =============================================================================
# Riders register with a JSON body. Only `email` is optional; the name,
# gender and date-of-birth fields need at least two characters.
# =============================================================================

from pydantic import BaseModel, Field


class RiderRegistration(BaseModel):
    """
    Schema for a rider registration.

    Unknown keys in the body are ignored.

    Example:
        {
            "phone": "0700000000",
            "gender": "female",
            "DOB": "1990-01-01",
            "fname": "Jane",
            "lname": "Doe"
        }
    """

    email: str | None = Field(
        default=None,
        description="Contact email (optional)"
    )

    phone: str = Field(
        ...,
        description="Contact phone number"
    )

    gender: str = Field(..., min_length=2)

    DOB: str = Field(
        ...,
        min_length=2,
        description="Date of birth as entered by the rider"
    )

    fname: str = Field(..., min_length=2, description="First name")

    lname: str = Field(..., min_length=2, description="Last name")
