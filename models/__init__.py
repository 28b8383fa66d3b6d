"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema, TimestampMixin
from models.airline import (
    VerificationStatus,
    AirlineCreate,
    AirlineUpdate,
    AirlineResponse,
    AirlineSummary,
    AirlineImportResponse,
)
from models.bag import (
    CarrierType,
    BagCreate,
    BagResponse,
    WebSearchResult,
    BagSearchResponse,
)
from models.user_bag import (
    UserBagCreate,
    UserBagUpdate,
    UserBagResponse,
    UserBagWithBag,
)
from models.bag_check import (
    BagCheckRequest,
    BagDimensions,
    BagCheckResult,
    BagCheckResponse,
    BagCheckWithDetails,
)

__all__ = [
    # Base
    "BaseSchema",
    "TimestampMixin",

    # Airlines
    "VerificationStatus",
    "AirlineCreate",
    "AirlineUpdate",
    "AirlineResponse",
    "AirlineSummary",
    "AirlineImportResponse",

    # Bags
    "CarrierType",
    "BagCreate",
    "BagResponse",
    "WebSearchResult",
    "BagSearchResponse",

    # User bags
    "UserBagCreate",
    "UserBagUpdate",
    "UserBagResponse",
    "UserBagWithBag",

    # Bag checks
    "BagCheckRequest",
    "BagDimensions",
    "BagCheckResult",
    "BagCheckResponse",
    "BagCheckWithDetails",
]
