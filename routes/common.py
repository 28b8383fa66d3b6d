"""
Helpers shared by the route modules.

User identity comes from the upstream identity provider, which forwards the
authenticated user's id in the X-User-Id header.
"""

from typing import Optional
from fastapi import Header
from fastapi.responses import JSONResponse
import structlog

from exceptions import AppError, AuthenticationRequiredError

logger = structlog.get_logger(__name__)


def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


def get_user_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    """Authenticated user id, or None for anonymous requests."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return None


def require_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Authenticated user id.

    Raises:
        AuthenticationRequiredError: If the request is anonymous
    """
    user_id = get_user_id(x_user_id)
    if not user_id:
        raise AuthenticationRequiredError()
    return user_id
