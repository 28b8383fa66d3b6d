"""
Length unit helpers.

Bag and airline dimensions are stored in centimeters; travelers may enter
inches. Values are rounded to two decimals after converting.
"""

from typing import Literal

CM_PER_INCH = 2.54

Unit = Literal["in", "cm"]


def cm_to_inches(cm: float) -> float:
    """
    Convert centimeters to inches.

    - 45.72 → 18.0
    - 50 → 19.69

    Args:
        cm: Length in centimeters

    Returns:
        Length in inches, rounded to 2 decimals
    """
    return round(cm / CM_PER_INCH, 2)


def inches_to_cm(inches: float) -> float:
    """
    Convert inches to centimeters.

    - 18 → 45.72
    - 8.5 → 21.59

    Args:
        inches: Length in inches

    Returns:
        Length in centimeters, rounded to 2 decimals
    """
    return round(inches * CM_PER_INCH, 2)


def to_cm(value: float, unit: Unit) -> float:
    """Normalize a length in the given unit to centimeters."""
    if unit == "in":
        return inches_to_cm(value)
    return value
