"""
File parsers module.
"""

from parsers.airline_parser import (
    parse_airline_reference,
    AirlineParseResult,
)

__all__ = [
    "parse_airline_reference",
    "AirlineParseResult",
]
