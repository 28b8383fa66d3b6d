"""
Airline schemas for validation and serialization.

An airline publishes a personal-item envelope and, optionally, a separate
envelope for soft pet carriers. All dimensions are centimeters.
"""

from pydantic import Field, field_validator
from typing import Optional
from enum import Enum
from datetime import datetime

from models.base import BaseSchema, TimestampMixin


class VerificationStatus(str, Enum):
    """Provenance of an airline's dimension data."""
    VERIFIED_OFFICIAL = "VERIFIED_OFFICIAL"
    UNVERIFIED_CONSERVATIVE = "UNVERIFIED_CONSERVATIVE"
    NEEDS_REVIEW = "NEEDS_REVIEW"


def _dimension(description: str):
    return Field(None, gt=0, allow_inf_nan=False, description=description)


class AirlineCreate(BaseSchema):
    """
    Create a new airline.

    Required: name, iata_code
    Dimensions are optional; an airline may not publish limits.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Airline name",
        examples=["American Airlines"]
    )
    iata_code: str = Field(
        ...,
        min_length=2,
        max_length=2,
        description="Two-letter IATA code",
        examples=["AA", "B6"]
    )
    logo_url: Optional[str] = Field(None, description="Logo image URL")

    max_personal_item_length_cm: Optional[float] = _dimension("Max personal item length (cm)")
    max_personal_item_width_cm: Optional[float] = _dimension("Max personal item width (cm)")
    max_personal_item_height_cm: Optional[float] = _dimension("Max personal item height (cm)")

    verification_status: VerificationStatus = Field(
        VerificationStatus.NEEDS_REVIEW,
        description="Provenance of the dimension data"
    )
    source_url: Optional[str] = Field(None, description="Policy page the limits came from")
    last_verified_date: Optional[datetime] = Field(None, description="When limits were last checked")
    conflict_notes: Optional[str] = Field(None, description="Notes on conflicting sources")

    pet_carrier_allowed: bool = Field(True, description="Whether in-cabin pet carriers are accepted")
    pet_carrier_max_length_cm: Optional[float] = _dimension("Max pet carrier length (cm)")
    pet_carrier_max_width_cm: Optional[float] = _dimension("Max pet carrier width (cm)")
    pet_carrier_max_height_cm: Optional[float] = _dimension("Max pet carrier height (cm)")

    @field_validator("iata_code")
    @classmethod
    def iata_uppercase(cls, v: str) -> str:
        """IATA code must be uppercase."""
        return v.upper()


class AirlineUpdate(BaseSchema):
    """
    Update existing airline.

    All fields optional - only provided fields are updated.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    logo_url: Optional[str] = None

    max_personal_item_length_cm: Optional[float] = _dimension("Max personal item length (cm)")
    max_personal_item_width_cm: Optional[float] = _dimension("Max personal item width (cm)")
    max_personal_item_height_cm: Optional[float] = _dimension("Max personal item height (cm)")

    verification_status: Optional[VerificationStatus] = None
    source_url: Optional[str] = None
    last_verified_date: Optional[datetime] = None
    conflict_notes: Optional[str] = None

    pet_carrier_allowed: Optional[bool] = None
    pet_carrier_max_length_cm: Optional[float] = _dimension("Max pet carrier length (cm)")
    pet_carrier_max_width_cm: Optional[float] = _dimension("Max pet carrier width (cm)")
    pet_carrier_max_height_cm: Optional[float] = _dimension("Max pet carrier height (cm)")


class AirlineResponse(BaseSchema, TimestampMixin):
    """
    Airline response with all fields.

    Used for GET responses.
    """

    id: str = Field(..., description="Airline UUID")
    name: str
    iata_code: str
    logo_url: Optional[str] = None

    max_personal_item_length_cm: Optional[float] = None
    max_personal_item_width_cm: Optional[float] = None
    max_personal_item_height_cm: Optional[float] = None

    verification_status: VerificationStatus = VerificationStatus.NEEDS_REVIEW
    source_url: Optional[str] = None
    last_verified_date: Optional[datetime] = None
    conflict_notes: Optional[str] = None

    pet_carrier_allowed: bool = True
    pet_carrier_max_length_cm: Optional[float] = None
    pet_carrier_max_width_cm: Optional[float] = None
    pet_carrier_max_height_cm: Optional[float] = None


class AirlineSummary(BaseSchema):
    """Airline limits echoed back with a bag check result."""

    name: str
    iata_code: str
    verification_status: VerificationStatus
    source_url: Optional[str] = None
    max_personal_item_length_cm: Optional[float] = None
    max_personal_item_width_cm: Optional[float] = None
    max_personal_item_height_cm: Optional[float] = None
    pet_carrier_allowed: bool
    pet_carrier_max_length_cm: Optional[float] = None
    pet_carrier_max_width_cm: Optional[float] = None
    pet_carrier_max_height_cm: Optional[float] = None


class AirlineImportResponse(BaseSchema):
    """Result of importing an airline reference sheet."""

    filename: str
    total_records: int
    created: int
    updated: int
    errors: list[dict] = Field(default_factory=list)
