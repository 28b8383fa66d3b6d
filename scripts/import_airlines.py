"""
Import airline limits from a CSV or Excel reference sheet.

Usage:
    python scripts/import_airlines.py path/to/airlines.xlsx
    python scripts/import_airlines.py path/to/airlines.csv --dry-run
"""

import argparse
import sys
from pathlib import Path

# Add backend to path so we can import modules
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from parsers.airline_parser import parse_airline_reference
from services.airline_service import get_airline_service
import structlog

logger = structlog.get_logger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Import airline reference sheet")
    parser.add_argument("file", type=Path, help="CSV or Excel file")
    parser.add_argument("--dry-run", action="store_true", help="Parse only, don't write")
    args = parser.parse_args()

    if not args.file.exists():
        print(f"✗ File not found: {args.file}")
        return 1

    result = parse_airline_reference(args.file)

    print(f"Parsed {len(result.airlines)} airlines, {result.rejected_rows} rows rejected")
    for error in result.errors:
        print(f"  row {error.row} [{error.field}]: {error.error}")

    if args.dry_run:
        for airline in result.airlines:
            print(f"  {airline.iata_code}  {airline.name}")
        return 0

    created, updated = get_airline_service().bulk_upsert(result.airlines)
    logger.info("airline_import_complete", created=created, updated=updated)
    print(f"✓ {created} created, {updated} updated")

    return 0 if result.success else 2


if __name__ == "__main__":
    sys.exit(main())
