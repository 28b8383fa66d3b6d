"""
Custom exception classes for the application.

Every error carries a machine-readable code and an HTTP status so routes
can serialize it without knowing the concrete type.
"""

from typing import Optional, Any
from datetime import datetime


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "AIRLINE_NOT_FOUND")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.utcnow().isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class BadRequestError(AppError):
    """Request cannot be served as given (400)."""

    def __init__(
        self,
        message: str,
        code: str = "BAD_REQUEST",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details
        )


class AuthenticationRequiredError(AppError):
    """Endpoint needs an authenticated user (401)."""

    def __init__(self):
        super().__init__(
            code="AUTH_REQUIRED",
            message="Authentication required",
            status_code=401
        )


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            status_code=404,
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ConflictError(AppError):
    """Conflict with existing resource (409)."""

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=409,
            details=details
        )


class DuplicateError(ConflictError):
    """Duplicate resource (409)."""

    def __init__(
        self,
        resource: str,
        field: str,
        value: str
    ):
        super().__init__(
            code=f"{resource.upper()}_{field.upper()}_EXISTS",
            message=f"{resource} with this {field} already exists",
            details={field: value}
        )


class ExternalServiceError(AppError):
    """External service failure (503)."""

    def __init__(
        self,
        service: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=f"{service.upper()}_ERROR",
            message=message,
            status_code=503,
            details={"service": service, **(details or {})}
        )


class DatabaseError(AppError):
    """Database operation failed (500)."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="DATABASE_ERROR",
            message=f"Database {operation} failed: {message}",
            status_code=500,
            details={"operation": operation, **(details or {})}
        )


# ===================
# AIRLINE ERRORS
# ===================

class AirlineNotFoundError(NotFoundError):
    """Airline not found (by id or IATA code)."""

    def __init__(self, identifier: str):
        super().__init__(
            resource="Airline",
            identifier=identifier,
            code="AIRLINE_NOT_FOUND"
        )


class AirlineIATAExistsError(DuplicateError):
    """Airline IATA code already exists."""

    def __init__(self, iata_code: str):
        super().__init__(
            resource="Airline",
            field="iata_code",
            value=iata_code
        )


class AirlineDimensionsUnavailableError(BadRequestError):
    """Airline has no published personal-item limits."""

    def __init__(self, iata_code: str):
        super().__init__(
            code="AIRLINE_DIMENSIONS_UNAVAILABLE",
            message="Airline dimensions not available",
            details={"iata_code": iata_code}
        )


class AirlineReferenceParseError(ValidationError):
    """Airline reference sheet could not be read."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="AIRLINE_REFERENCE_PARSE_ERROR",
            message=message,
            details=details
        )


# ===================
# BAG ERRORS
# ===================

class BagNotFoundError(NotFoundError):
    """Bag not found."""

    def __init__(self, bag_id: str):
        super().__init__(
            resource="Bag",
            identifier=bag_id,
            code="BAG_NOT_FOUND"
        )


class UserBagNotFoundError(NotFoundError):
    """Saved bag not found for this user."""

    def __init__(self, user_bag_id: str):
        super().__init__(
            resource="User bag",
            identifier=user_bag_id,
            code="USER_BAG_NOT_FOUND"
        )


class BagSearchError(ExternalServiceError):
    """Bag dimension web search failed."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            service="bag_search",
            message=message,
            details=details
        )
