"""
Fit evaluator: core comparison logic.

Decides whether a bag fits an airline's personal-item (or pet carrier)
envelope and which axes it exceeds. Pure: no database access, no I/O.
"""

from dataclasses import dataclass, field
from typing import Optional
import structlog

from exceptions import AirlineDimensionsUnavailableError
from models.airline import AirlineResponse

logger = structlog.get_logger(__name__)


# Categorical outcomes reported in place of axis names
PET_CARRIERS_NOT_ALLOWED = "Pet carriers not allowed"
PET_CARRIER_POLICY_UNCLEAR = "Pet carrier policy unclear"

AXES = ("length", "width", "height")


@dataclass(frozen=True)
class BagSize:
    """Bag dimensions in centimeters."""
    length_cm: float
    width_cm: float
    height_cm: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.length_cm, self.width_cm, self.height_cm)


@dataclass(frozen=True)
class Envelope:
    """Maximum length/width/height in centimeters. Any may be unpublished."""
    length_cm: Optional[float] = None
    width_cm: Optional[float] = None
    height_cm: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        """True if all three maximums are published."""
        return all(v is not None for v in self.as_tuple())

    def as_tuple(self) -> tuple[Optional[float], Optional[float], Optional[float]]:
        return (self.length_cm, self.width_cm, self.height_cm)


@dataclass(frozen=True)
class AirlineLimits:
    """The limit set an airline publishes."""
    iata_code: str
    personal_item: Envelope
    pet_carrier: Envelope = field(default_factory=Envelope)
    pet_carrier_allowed: bool = True

    @classmethod
    def from_airline(cls, airline: AirlineResponse) -> "AirlineLimits":
        """Build limits from a stored airline."""
        return cls(
            iata_code=airline.iata_code,
            personal_item=Envelope(
                airline.max_personal_item_length_cm,
                airline.max_personal_item_width_cm,
                airline.max_personal_item_height_cm,
            ),
            pet_carrier=Envelope(
                airline.pet_carrier_max_length_cm,
                airline.pet_carrier_max_width_cm,
                airline.pet_carrier_max_height_cm,
            ),
            pet_carrier_allowed=airline.pet_carrier_allowed,
        )


@dataclass(frozen=True)
class FitResult:
    """Verdict plus the exceeded axes (or a single categorical reason)."""
    fits: bool
    exceeds_in: list[str] = field(default_factory=list)


def evaluate_fit(
    bag: BagSize,
    limits: AirlineLimits,
    is_pet_carrier: bool = False
) -> FitResult:
    """
    Compare a bag against an airline's envelope.

    A bag exactly at the limit fits (comparison is <=). Exceeded axes are
    always reported in length, width, height order.

    Pet carriers are checked only against the carrier envelope. An airline
    that allows carriers without publishing carrier limits yields the
    "policy unclear" verdict; regular limits are never substituted.

    Args:
        bag: Bag dimensions (cm)
        limits: Airline limit set
        is_pet_carrier: Whether the bag is a pet carrier

    Returns:
        FitResult

    Raises:
        AirlineDimensionsUnavailableError: Regular check against an airline
            with no complete personal-item limits
    """
    if is_pet_carrier:
        if not limits.pet_carrier_allowed:
            return FitResult(fits=False, exceeds_in=[PET_CARRIERS_NOT_ALLOWED])

        if not limits.pet_carrier.is_complete:
            return FitResult(fits=False, exceeds_in=[PET_CARRIER_POLICY_UNCLEAR])

        return _compare(bag, limits.pet_carrier)

    if not limits.personal_item.is_complete:
        logger.warning("airline_dimensions_unavailable", airline_code=limits.iata_code)
        raise AirlineDimensionsUnavailableError(limits.iata_code)

    return _compare(bag, limits.personal_item)


def _compare(bag: BagSize, envelope: Envelope) -> FitResult:
    """Three-axis inclusive comparison."""
    exceeded = [
        axis
        for axis, size, maximum in zip(AXES, bag.as_tuple(), envelope.as_tuple())
        if size > maximum
    ]
    return FitResult(fits=not exceeded, exceeds_in=exceeded)
