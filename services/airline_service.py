"""
Airline service for reference data operations.

Lookup by IATA code, listing, create/update, and seeding of the reference
airlines.
"""

from typing import Optional
from datetime import datetime
import structlog

from config import get_supabase_client
from config.airlines import REFERENCE_AIRLINES
from models.airline import (
    AirlineCreate,
    AirlineUpdate,
    AirlineResponse,
)
from exceptions import (
    AirlineNotFoundError,
    AirlineIATAExistsError,
    DatabaseError
)

logger = structlog.get_logger(__name__)


class AirlineService:
    """
    Airline business logic.

    Handles reads and writes against the airlines table.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = "airlines"

    # ===================
    # READ OPERATIONS
    # ===================

    def get_all(self) -> list[AirlineResponse]:
        """
        Get all airlines ordered by name.

        Small table, no pagination.

        Returns:
            List of AirlineResponse
        """
        logger.info("getting_airlines")

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .order("name")
                .execute()
            )

            airlines = [AirlineResponse(**row) for row in result.data]

            logger.info("airlines_retrieved", count=len(airlines))

            return airlines

        except Exception as e:
            logger.error("get_airlines_failed", error=str(e))
            raise DatabaseError("select", str(e))

    def get_by_iata_code(self, iata_code: str) -> AirlineResponse:
        """
        Get an airline by IATA code.

        Args:
            iata_code: Two-letter code (any case)

        Returns:
            AirlineResponse

        Raises:
            AirlineNotFoundError: If no airline has this code
        """
        code = iata_code.strip().upper()
        logger.debug("getting_airline_by_iata", airline_code=code)

        airline = self.find_by_iata_code(code)
        if not airline:
            raise AirlineNotFoundError(code)

        return airline

    def find_by_iata_code(self, iata_code: str) -> Optional[AirlineResponse]:
        """
        Look up an airline by IATA code.

        Returns:
            AirlineResponse or None if not found
        """
        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("iata_code", iata_code.strip().upper())
                .execute()
            )

            if not result.data:
                return None

            return AirlineResponse(**result.data[0])

        except Exception as e:
            logger.error(
                "find_airline_by_iata_failed",
                airline_code=iata_code,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def get_by_id(self, airline_id: str) -> AirlineResponse:
        """
        Get an airline by ID.

        Raises:
            AirlineNotFoundError: If airline doesn't exist
        """
        logger.debug("getting_airline", airline_id=airline_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("id", airline_id)
                .execute()
            )
        except Exception as e:
            logger.error("get_airline_failed", airline_id=airline_id, error=str(e))
            raise DatabaseError("select", str(e))

        if not result.data:
            raise AirlineNotFoundError(airline_id)

        return AirlineResponse(**result.data[0])

    # ===================
    # WRITE OPERATIONS
    # ===================

    def create(self, data: AirlineCreate) -> AirlineResponse:
        """
        Create a new airline.

        Args:
            data: Airline creation data

        Returns:
            Created AirlineResponse

        Raises:
            AirlineIATAExistsError: If IATA code already exists
        """
        logger.info("creating_airline", airline_code=data.iata_code)

        if self.find_by_iata_code(data.iata_code):
            raise AirlineIATAExistsError(data.iata_code)

        try:
            result = (
                self.db.table(self.table)
                .insert(data.model_dump(mode="json"))
                .execute()
            )

            airline = AirlineResponse(**result.data[0])

            logger.info(
                "airline_created",
                airline_id=airline.id,
                airline_code=airline.iata_code
            )

            return airline

        except Exception as e:
            logger.error("create_airline_failed", airline_code=data.iata_code, error=str(e))
            raise DatabaseError("insert", str(e))

    def update(self, airline_id: str, data: AirlineUpdate) -> AirlineResponse:
        """
        Update an existing airline.

        Only provided fields are written.

        Raises:
            AirlineNotFoundError: If airline doesn't exist
        """
        logger.info("updating_airline", airline_id=airline_id)

        existing = self.get_by_id(airline_id)

        update_data = data.model_dump(mode="json", exclude_unset=True)
        if not update_data:
            return existing

        update_data["updated_at"] = datetime.utcnow().isoformat()

        try:
            result = (
                self.db.table(self.table)
                .update(update_data)
                .eq("id", airline_id)
                .execute()
            )

            airline = AirlineResponse(**result.data[0])

            logger.info(
                "airline_updated",
                airline_id=airline_id,
                fields=[k for k in update_data if k != "updated_at"]
            )

            return airline

        except Exception as e:
            logger.error("update_airline_failed", airline_id=airline_id, error=str(e))
            raise DatabaseError("update", str(e))

    # ===================
    # BULK OPERATIONS
    # ===================

    def bulk_upsert(self, airlines: list[AirlineCreate]) -> tuple[int, int]:
        """
        Create airlines that don't exist, update those that do (by IATA code).

        Args:
            airlines: List of AirlineCreate objects

        Returns:
            Tuple of (created_count, updated_count)
        """
        logger.info("bulk_upsert_airlines", count=len(airlines))

        created = 0
        updated = 0

        for data in airlines:
            try:
                existing = self.find_by_iata_code(data.iata_code)

                if existing:
                    update_data = data.model_dump(mode="json", exclude_unset=True)
                    update_data.pop("iata_code", None)
                    update_data["updated_at"] = datetime.utcnow().isoformat()
                    self.db.table(self.table).update(update_data).eq("id", existing.id).execute()
                    updated += 1
                else:
                    self.db.table(self.table).insert(data.model_dump(mode="json")).execute()
                    created += 1

            except Exception as e:
                logger.error("bulk_upsert_airline_failed", airline_code=data.iata_code, error=str(e))
                continue

        logger.info("bulk_upsert_complete", created=created, updated=updated)
        return created, updated

    def seed_reference_data(self) -> int:
        """
        Insert the reference airlines when the table is empty.

        Returns:
            Number of airlines inserted (0 if already seeded)
        """
        try:
            existing = self.db.table(self.table).select("id", count="exact").execute()
        except Exception as e:
            logger.error("count_airlines_failed", error=str(e))
            raise DatabaseError("count", str(e))

        if existing.count:
            logger.info("airlines_already_seeded", count=existing.count)
            return 0

        verified_at = datetime.utcnow()
        rows = [
            AirlineCreate(**airline, last_verified_date=verified_at).model_dump(mode="json")
            for airline in REFERENCE_AIRLINES
        ]

        try:
            result = self.db.table(self.table).insert(rows).execute()
        except Exception as e:
            logger.error("seed_airlines_failed", error=str(e))
            raise DatabaseError("insert", str(e))

        logger.info("airlines_seeded", count=len(result.data))
        return len(result.data)


# Singleton instance for convenience
_airline_service: Optional[AirlineService] = None


def get_airline_service() -> AirlineService:
    """Get or create AirlineService instance."""
    global _airline_service
    if _airline_service is None:
        _airline_service = AirlineService()
    return _airline_service
