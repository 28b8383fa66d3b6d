"""
Bag check API routes.

POST /api/bag-check is open to anonymous travelers; signed-in users also
get the check recorded in their history.
"""

from typing import Optional
from fastapi import APIRouter, Depends
import structlog

from models.bag_check import BagCheckRequest, BagCheckResult, BagCheckWithDetails
from services.bag_check_service import get_bag_check_service
from routes.common import handle_error, get_user_id, require_user_id

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Bag Checks"])


@router.post("/api/bag-check", response_model=BagCheckResult)
async def check_bag(
    data: BagCheckRequest,
    user_id: Optional[str] = Depends(get_user_id)
):
    """
    Check whether a bag fits under the seat.

    Pet carrier checks that the airline forbids, or whose limits the airline
    does not publish, return fits_under_seat=false with the reason as the
    only entry of exceeds_in.

    Raises:
        400: Airline has no published dimensions
        404: Airline not found
        422: Validation error (missing or non-positive dimensions)
    """
    try:
        service = get_bag_check_service()
        return service.check(data, user_id=user_id)

    except Exception as e:
        return handle_error(e)


@router.get("/api/user/bag-checks", response_model=list[BagCheckWithDetails])
async def list_bag_checks(user_id: str = Depends(require_user_id)):
    """List the user's past bag checks, newest first."""
    try:
        service = get_bag_check_service()
        return service.get_history(user_id)

    except Exception as e:
        return handle_error(e)
