"""
Bag service for catalog operations.

Handles listing, lookup, creation and brand/model search of bags.
"""

from typing import Optional
import structlog

from config import get_supabase_client
from integrations.google_search import search_bag_dimensions
from models.bag import (
    BagCreate,
    BagResponse,
    BagSearchResponse,
    WebSearchResult,
)
from exceptions import (
    BagNotFoundError,
    BagSearchError,
    DatabaseError
)

logger = structlog.get_logger(__name__)

MAX_SEARCH_RESULTS = 3

NOT_FOUND_MESSAGE = "Bag not found in database. Please enter dimensions manually."
SEARCH_UNAVAILABLE_MESSAGE = (
    "Bag not found in database. Search service unavailable. "
    "Please enter dimensions manually."
)


class BagService:
    """
    Bag catalog business logic.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = "bags"

    # ===================
    # READ OPERATIONS
    # ===================

    def get_all(self) -> list[BagResponse]:
        """Get every bag in the catalog."""
        logger.info("getting_bags")

        try:
            result = self.db.table(self.table).select("*").execute()
            bags = [BagResponse(**row) for row in result.data]
            logger.info("bags_retrieved", count=len(bags))
            return bags
        except Exception as e:
            logger.error("get_bags_failed", error=str(e))
            raise DatabaseError("select", str(e))

    def get_by_id(self, bag_id: str) -> BagResponse:
        """
        Get a single bag by ID.

        Raises:
            BagNotFoundError: If bag doesn't exist
        """
        logger.debug("getting_bag", bag_id=bag_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("id", bag_id)
                .execute()
            )
        except Exception as e:
            logger.error("get_bag_failed", bag_id=bag_id, error=str(e))
            raise DatabaseError("select", str(e))

        if not result.data:
            raise BagNotFoundError(bag_id)

        return BagResponse(**result.data[0])

    def search_by_brand(self, brand: str) -> list[BagResponse]:
        """
        Get all bags of a brand, ordered by model.

        Args:
            brand: Exact brand name
        """
        logger.debug("searching_bags_by_brand", brand=brand)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("brand", brand)
                .order("model")
                .execute()
            )
            return [BagResponse(**row) for row in result.data]
        except Exception as e:
            logger.error("search_bags_by_brand_failed", brand=brand, error=str(e))
            raise DatabaseError("select", str(e))

    def search(self, brand: str, model: str) -> BagSearchResponse:
        """
        Find a bag by brand and model.

        Looks in the catalog first (model matched case-insensitively as a
        substring). Falls back to a web search whose failure is reported in
        the message rather than raised.

        Args:
            brand: Bag brand
            model: Model name or fragment

        Returns:
            BagSearchResponse
        """
        logger.info("searching_bag", brand=brand, model=model)

        needle = model.lower()
        for bag in self.search_by_brand(brand):
            if bag.model and needle in bag.model.lower():
                logger.info("bag_found_in_catalog", bag_id=bag.id)
                return BagSearchResponse(found=True, bag=bag)

        try:
            items = search_bag_dimensions(brand, model)
        except BagSearchError as e:
            logger.warning("bag_search_unavailable", error=e.message)
            return BagSearchResponse(found=False, message=SEARCH_UNAVAILABLE_MESSAGE)

        results = [
            WebSearchResult(
                title=item.get("title", ""),
                link=item.get("link", ""),
                snippet=item.get("snippet"),
            )
            for item in items[:MAX_SEARCH_RESULTS]
        ]

        return BagSearchResponse(
            found=False,
            message=NOT_FOUND_MESSAGE,
            search_results=results
        )

    # ===================
    # WRITE OPERATIONS
    # ===================

    def create(self, data: BagCreate) -> BagResponse:
        """
        Create a new bag.

        Args:
            data: Bag creation data

        Returns:
            Created BagResponse
        """
        logger.info("creating_bag", brand=data.brand, model=data.model)

        try:
            result = (
                self.db.table(self.table)
                .insert(data.model_dump(mode="json"))
                .execute()
            )

            bag = BagResponse(**result.data[0])

            logger.info("bag_created", bag_id=bag.id)

            return bag

        except Exception as e:
            logger.error("create_bag_failed", brand=data.brand, error=str(e))
            raise DatabaseError("insert", str(e))


# Singleton instance
_bag_service: Optional[BagService] = None


def get_bag_service() -> BagService:
    """Get or create BagService instance."""
    global _bag_service
    if _bag_service is None:
        _bag_service = BagService()
    return _bag_service
