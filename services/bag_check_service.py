"""
Bag check service.

Runs a fit query end to end: normalize units, look up the airline,
evaluate the fit, and record the check for authenticated users.
"""

from typing import Optional
import structlog

from config import get_supabase_client
from services.airline_service import get_airline_service
from services.fit_evaluator import AXES, AirlineLimits, BagSize, evaluate_fit
from models.airline import AirlineResponse, AirlineSummary
from models.bag_check import (
    BagCheckRequest,
    BagCheckResult,
    BagCheckWithDetails,
    BagDimensions,
)
from utils.units import cm_to_inches, to_cm
from exceptions import DatabaseError, ValidationError

logger = structlog.get_logger(__name__)


class BagCheckService:
    """
    Bag fit checks and check history.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = "bag_checks"
        self.airline_service = get_airline_service()

    def check(self, request: BagCheckRequest, user_id: Optional[str] = None) -> BagCheckResult:
        """
        Check whether a bag fits under the seat on an airline.

        Args:
            request: Fit query
            user_id: Authenticated user id; when set the check is recorded

        Returns:
            BagCheckResult

        Raises:
            AirlineNotFoundError: Unknown IATA code
            AirlineDimensionsUnavailableError: Airline has no published limits
            ValidationError: A dimension rounds to zero in centimeters
        """
        size = BagSize(
            length_cm=to_cm(request.length, request.unit),
            width_cm=to_cm(request.width, request.unit),
            height_cm=to_cm(request.height, request.unit),
        )

        too_small = [
            axis for axis, value in zip(AXES, size.as_tuple())
            if value <= 0
        ]
        if too_small:
            raise ValidationError(
                message="Bag dimensions must be positive in centimeters",
                code="INVALID_BAG_DIMENSIONS",
                details={"axes": too_small, "unit": request.unit}
            )

        airline = self.airline_service.get_by_iata_code(request.airline_iata_code)

        verdict = evaluate_fit(
            size,
            AirlineLimits.from_airline(airline),
            is_pet_carrier=request.is_pet_carrier
        )

        logger.info(
            "bag_checked",
            airline_code=airline.iata_code,
            is_pet_carrier=request.is_pet_carrier,
            fits=verdict.fits,
            exceeds_in=verdict.exceeds_in
        )

        bag_check_id = None
        if user_id:
            bag_check_id = self._record(user_id, request, airline, size, verdict.fits)

        return BagCheckResult(
            fits_under_seat=verdict.fits,
            exceeds_in=verdict.exceeds_in,
            is_pet_carrier=request.is_pet_carrier,
            airline=AirlineSummary(**airline.model_dump(include=set(AirlineSummary.model_fields))),
            bag_dimensions=BagDimensions(
                length_cm=size.length_cm,
                width_cm=size.width_cm,
                height_cm=size.height_cm,
                length_in=cm_to_inches(size.length_cm),
                width_in=cm_to_inches(size.width_cm),
                height_in=cm_to_inches(size.height_cm),
            ),
            bag_check_id=bag_check_id,
        )

    def get_history(self, user_id: str) -> list[BagCheckWithDetails]:
        """
        Get a user's past checks, newest first, with airline and bag.

        Args:
            user_id: Authenticated user id
        """
        logger.info("getting_bag_check_history", user_id=user_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*, airline:airlines(*), bag:bags(*)")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return [BagCheckWithDetails(**row) for row in result.data]
        except Exception as e:
            logger.error("get_bag_check_history_failed", user_id=user_id, error=str(e))
            raise DatabaseError("select", str(e))

    def _record(
        self,
        user_id: str,
        request: BagCheckRequest,
        airline: AirlineResponse,
        size: BagSize,
        fits: bool
    ) -> str:
        """Store the audit record and return its id."""
        try:
            result = (
                self.db.table(self.table)
                .insert({
                    "user_id": user_id,
                    "bag_id": request.bag_id,
                    "airline_id": airline.id,
                    "flight_number": request.flight_number,
                    "bag_length_cm": size.length_cm,
                    "bag_width_cm": size.width_cm,
                    "bag_height_cm": size.height_cm,
                    "is_pet_carrier": request.is_pet_carrier,
                    "fits_under_seat": fits,
                })
                .execute()
            )
        except Exception as e:
            logger.error("record_bag_check_failed", user_id=user_id, error=str(e))
            raise DatabaseError("insert", str(e))

        bag_check_id = result.data[0]["id"]
        logger.info("bag_check_recorded", bag_check_id=bag_check_id)
        return bag_check_id


# Singleton instance
_bag_check_service: Optional[BagCheckService] = None


def get_bag_check_service() -> BagCheckService:
    """Get or create BagCheckService instance."""
    global _bag_check_service
    if _bag_check_service is None:
        _bag_check_service = BagCheckService()
    return _bag_check_service
