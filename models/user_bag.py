"""
Saved bag schemas (a user's personal bag collection).
"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from models.base import BaseSchema
from models.bag import BagResponse


class UserBagCreate(BaseSchema):
    """Save a catalog bag to the current user's collection."""

    bag_id: str = Field(..., min_length=1, description="Bag UUID")
    custom_name: Optional[str] = Field(None, max_length=100, examples=["Weekend backpack"])


class UserBagUpdate(BaseSchema):
    """Rename a saved bag."""

    custom_name: str = Field(..., min_length=1, max_length=100)


class UserBagResponse(BaseSchema):
    """Saved bag row."""

    id: str
    user_id: str
    bag_id: str
    custom_name: Optional[str] = None
    created_at: datetime


class UserBagWithBag(UserBagResponse):
    """Saved bag joined with its bag record."""

    bag: BagResponse
