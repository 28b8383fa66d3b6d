"""
Business logic services.

Each service handles one domain area.
"""

from services.fit_evaluator import (
    BagSize,
    Envelope,
    AirlineLimits,
    FitResult,
    evaluate_fit,
)
from services.airline_service import AirlineService, get_airline_service
from services.bag_service import BagService, get_bag_service
from services.user_bag_service import UserBagService, get_user_bag_service
from services.bag_check_service import BagCheckService, get_bag_check_service

__all__ = [
    "BagSize",
    "Envelope",
    "AirlineLimits",
    "FitResult",
    "evaluate_fit",
    "AirlineService",
    "get_airline_service",
    "BagService",
    "get_bag_service",
    "UserBagService",
    "get_user_bag_service",
    "BagCheckService",
    "get_bag_check_service",
]
