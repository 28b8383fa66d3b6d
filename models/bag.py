"""
Bag schemas for validation and serialization.
"""

from pydantic import Field
from typing import Optional
from enum import Enum

from models.base import BaseSchema, TimestampMixin


class CarrierType(str, Enum):
    """Pet carrier construction."""
    HARD_SIDED = "hard-sided"
    SOFT_SIDED = "soft-sided"


class BagCreate(BaseSchema):
    """
    Create a new bag.

    Required: length_cm, width_cm, height_cm
    """

    brand: Optional[str] = Field(None, max_length=100, examples=["Sherpa"])
    model: Optional[str] = Field(None, max_length=200, examples=["Original Deluxe"])
    length_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Length (cm)")
    width_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Width (cm)")
    height_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Height (cm)")
    is_pet_carrier: bool = Field(False, description="Bag is a pet carrier")
    carrier_type: Optional[CarrierType] = Field(None, description="Pet carrier construction")
    is_verified: bool = Field(False, description="Curated reference bag")
    image_url: Optional[str] = None
    source_url: Optional[str] = None


class BagResponse(BaseSchema, TimestampMixin):
    """Bag response with all fields."""

    id: str = Field(..., description="Bag UUID")
    brand: Optional[str] = None
    model: Optional[str] = None
    length_cm: float
    width_cm: float
    height_cm: float
    is_pet_carrier: bool = False
    carrier_type: Optional[CarrierType] = None
    is_verified: bool = False
    image_url: Optional[str] = None
    source_url: Optional[str] = None


class WebSearchResult(BaseSchema):
    """Single web search hit for a bag's specifications."""

    title: str
    link: str
    snippet: Optional[str] = None


class BagSearchResponse(BaseSchema):
    """
    Result of looking up a bag by brand and model.

    When the catalog has the bag, `bag` is set. Otherwise `message` asks for
    manual entry and `search_results` holds up to three web hits.
    """

    found: bool
    bag: Optional[BagResponse] = None
    message: Optional[str] = None
    search_results: list[WebSearchResult] = Field(default_factory=list)
