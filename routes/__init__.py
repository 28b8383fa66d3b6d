"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.airlines import router as airlines_router
from routes.bags import router as bags_router
from routes.user_bags import router as user_bags_router
from routes.bag_checks import router as bag_checks_router

__all__ = [
    "airlines_router",
    "bags_router",
    "user_bags_router",
    "bag_checks_router",
]
