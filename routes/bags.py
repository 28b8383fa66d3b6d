"""
Bag catalog API routes.
"""

from fastapi import APIRouter, Query
from typing import Optional
import structlog

from models.bag import BagCreate, BagResponse, BagSearchResponse
from services.bag_service import get_bag_service
from exceptions import BadRequestError
from routes.common import handle_error

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=list[BagResponse])
async def list_bags():
    """List every bag in the catalog."""
    try:
        service = get_bag_service()
        return service.get_all()

    except Exception as e:
        return handle_error(e)


@router.get("/search", response_model=BagSearchResponse)
async def search_bags(
    brand: Optional[str] = Query(None, description="Bag brand"),
    model: Optional[str] = Query(None, description="Model name or fragment")
):
    """
    Find a bag by brand and model.

    Searches the catalog first, then the web. A web hit only returns links;
    dimensions must still be entered manually.

    Raises:
        400: Brand or model missing
    """
    try:
        if not brand or not brand.strip() or not model or not model.strip():
            raise BadRequestError(
                code="BAG_SEARCH_TERMS_REQUIRED",
                message="Brand and model are required"
            )

        service = get_bag_service()
        return service.search(brand.strip(), model.strip())

    except Exception as e:
        return handle_error(e)


@router.get("/{bag_id}", response_model=BagResponse)
async def get_bag(bag_id: str):
    """
    Get a single bag by ID.

    Raises:
        404: Bag not found
    """
    try:
        service = get_bag_service()
        return service.get_by_id(bag_id)

    except Exception as e:
        return handle_error(e)


@router.post("", response_model=BagResponse, status_code=201)
async def create_bag(data: BagCreate):
    """
    Create a new bag.

    Raises:
        422: Validation error (missing or non-positive dimensions)
    """
    try:
        service = get_bag_service()
        return service.create(data)

    except Exception as e:
        return handle_error(e)
