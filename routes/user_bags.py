"""
Saved bag API routes.

All endpoints act on the authenticated user's own collection.
"""

from fastapi import APIRouter, Depends
import structlog

from models.user_bag import (
    UserBagCreate,
    UserBagUpdate,
    UserBagResponse,
    UserBagWithBag,
)
from services.user_bag_service import get_user_bag_service
from routes.common import handle_error, require_user_id

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/user/bags", tags=["User Bags"])


@router.get("", response_model=list[UserBagWithBag])
async def list_user_bags(user_id: str = Depends(require_user_id)):
    """List the user's saved bags, newest first."""
    try:
        service = get_user_bag_service()
        return service.get_for_user(user_id)

    except Exception as e:
        return handle_error(e)


@router.post("", response_model=UserBagResponse, status_code=201)
async def add_user_bag(data: UserBagCreate, user_id: str = Depends(require_user_id)):
    """Save a bag to the user's collection."""
    try:
        service = get_user_bag_service()
        return service.add(user_id, data)

    except Exception as e:
        return handle_error(e)


@router.patch("/{user_bag_id}", response_model=UserBagResponse)
async def rename_user_bag(
    user_bag_id: str,
    data: UserBagUpdate,
    user_id: str = Depends(require_user_id)
):
    """
    Rename a saved bag.

    Raises:
        404: Saved bag not found
        422: Empty custom name
    """
    try:
        service = get_user_bag_service()
        return service.rename(user_id, user_bag_id, data)

    except Exception as e:
        return handle_error(e)


@router.delete("/{bag_id}", status_code=204)
async def remove_user_bag(bag_id: str, user_id: str = Depends(require_user_id)):
    """Remove a bag from the user's collection."""
    try:
        service = get_user_bag_service()
        service.remove(user_id, bag_id)
        return None  # 204 No Content

    except Exception as e:
        return handle_error(e)
