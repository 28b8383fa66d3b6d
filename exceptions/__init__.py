"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    BadRequestError,
    AuthenticationRequiredError,
    NotFoundError,
    ValidationError,
    ConflictError,
    DuplicateError,
    ExternalServiceError,
    DatabaseError,

    # Airlines
    AirlineNotFoundError,
    AirlineIATAExistsError,
    AirlineDimensionsUnavailableError,
    AirlineReferenceParseError,

    # Bags
    BagNotFoundError,
    UserBagNotFoundError,
    BagSearchError,
)

__all__ = [
    # Base
    "AppError",
    "BadRequestError",
    "AuthenticationRequiredError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateError",
    "ExternalServiceError",
    "DatabaseError",

    # Airlines
    "AirlineNotFoundError",
    "AirlineIATAExistsError",
    "AirlineDimensionsUnavailableError",
    "AirlineReferenceParseError",

    # Bags
    "BagNotFoundError",
    "UserBagNotFoundError",
    "BagSearchError",
]
