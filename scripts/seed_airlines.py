"""
Seed airlines table with the reference airlines.

Run this script to populate an empty airlines table. Does nothing if any
airline already exists.
"""

import sys
from pathlib import Path

# Add backend to path so we can import modules
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from services.airline_service import get_airline_service
import structlog

logger = structlog.get_logger(__name__)


def seed_airlines() -> int:
    """Insert reference airline data."""
    service = get_airline_service()

    try:
        inserted = service.seed_reference_data()
    except Exception as e:
        logger.error("seed_airlines_failed", error=str(e))
        print(f"✗ Failed to seed airlines: {e}")
        raise

    if inserted:
        print(f"✓ Successfully seeded {inserted} airlines")
    else:
        print("✓ Airlines table already populated")

    return inserted


if __name__ == "__main__":
    print("Seeding airlines table...")
    seed_airlines()
    print("\nDone!")
