"""
Bag check schemas.

A bag check is a fit query against one airline. Authenticated checks are
kept as an audit trail in the bag_checks table.
"""

from pydantic import Field
from typing import Optional, Literal
from datetime import datetime

from models.base import BaseSchema
from models.airline import AirlineResponse, AirlineSummary
from models.bag import BagResponse


class BagCheckRequest(BaseSchema):
    """
    Fit query input.

    Dimensions are given in `unit` and normalized to centimeters before
    comparison.
    """

    airline_iata_code: str = Field(..., min_length=2, max_length=2, examples=["AA"])
    flight_number: Optional[str] = Field(None, max_length=10, examples=["AA100"])
    length: float = Field(..., gt=0, allow_inf_nan=False, description="Bag length")
    width: float = Field(..., gt=0, allow_inf_nan=False, description="Bag width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Bag height")
    unit: Literal["in", "cm"] = Field("cm", description="Unit of the dimensions")
    is_pet_carrier: bool = Field(False, description="Bag is a pet carrier")
    bag_id: Optional[str] = Field(None, description="Catalog bag being checked")


class BagDimensions(BaseSchema):
    """Normalized bag dimensions with inch equivalents for display."""

    length_cm: float
    width_cm: float
    height_cm: float
    length_in: float
    width_in: float
    height_in: float


class BagCheckResult(BaseSchema):
    """Fit verdict returned to the client."""

    fits_under_seat: bool
    exceeds_in: list[str] = Field(
        default_factory=list,
        description="Exceeded axes in length/width/height order, or a single policy reason"
    )
    is_pet_carrier: bool
    airline: AirlineSummary
    bag_dimensions: BagDimensions
    bag_check_id: Optional[str] = Field(None, description="Audit record id (authenticated checks only)")


class BagCheckResponse(BaseSchema):
    """Stored bag check record."""

    id: str
    user_id: Optional[str] = None
    bag_id: Optional[str] = None
    airline_id: str
    flight_number: Optional[str] = None
    bag_length_cm: float
    bag_width_cm: float
    bag_height_cm: float
    is_pet_carrier: bool = False
    fits_under_seat: bool
    created_at: datetime


class BagCheckWithDetails(BagCheckResponse):
    """Bag check joined with its airline and (optional) bag."""

    airline: AirlineResponse
    bag: Optional[BagResponse] = None
