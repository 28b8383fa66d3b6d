"""
User bag service.

A user's saved bag collection: list, add, rename and remove.
"""

from typing import Optional
import structlog

from config import get_supabase_client
from models.user_bag import (
    UserBagCreate,
    UserBagUpdate,
    UserBagResponse,
    UserBagWithBag,
)
from exceptions import (
    UserBagNotFoundError,
    DatabaseError
)

logger = structlog.get_logger(__name__)


class UserBagService:
    """
    Saved bag operations, always scoped to one user.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = "user_bags"

    def get_for_user(self, user_id: str) -> list[UserBagWithBag]:
        """
        Get a user's saved bags, newest first, joined with the bag.

        Args:
            user_id: Authenticated user id
        """
        logger.info("getting_user_bags", user_id=user_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*, bag:bags(*)")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            user_bags = [UserBagWithBag(**row) for row in result.data]
            logger.info("user_bags_retrieved", user_id=user_id, count=len(user_bags))
            return user_bags
        except Exception as e:
            logger.error("get_user_bags_failed", user_id=user_id, error=str(e))
            raise DatabaseError("select", str(e))

    def add(self, user_id: str, data: UserBagCreate) -> UserBagResponse:
        """
        Save a bag to a user's collection.

        Args:
            user_id: Authenticated user id
            data: Bag id and optional custom name
        """
        logger.info("adding_user_bag", user_id=user_id, bag_id=data.bag_id)

        try:
            result = (
                self.db.table(self.table)
                .insert({
                    "user_id": user_id,
                    "bag_id": data.bag_id,
                    "custom_name": data.custom_name,
                })
                .execute()
            )

            user_bag = UserBagResponse(**result.data[0])
            logger.info("user_bag_added", user_bag_id=user_bag.id)
            return user_bag

        except Exception as e:
            logger.error("add_user_bag_failed", user_id=user_id, error=str(e))
            raise DatabaseError("insert", str(e))

    def rename(self, user_id: str, user_bag_id: str, data: UserBagUpdate) -> UserBagResponse:
        """
        Change the custom name of a saved bag.

        Raises:
            UserBagNotFoundError: If the saved bag doesn't exist or belongs
                to another user
        """
        logger.info("renaming_user_bag", user_id=user_id, user_bag_id=user_bag_id)

        try:
            existing = (
                self.db.table(self.table)
                .select("id")
                .eq("id", user_bag_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error("get_user_bag_failed", user_bag_id=user_bag_id, error=str(e))
            raise DatabaseError("select", str(e))

        if not existing.data:
            raise UserBagNotFoundError(user_bag_id)

        try:
            result = (
                self.db.table(self.table)
                .update({"custom_name": data.custom_name})
                .eq("id", user_bag_id)
                .eq("user_id", user_id)
                .execute()
            )
            return UserBagResponse(**result.data[0])
        except Exception as e:
            logger.error("rename_user_bag_failed", user_bag_id=user_bag_id, error=str(e))
            raise DatabaseError("update", str(e))

    def remove(self, user_id: str, bag_id: str) -> bool:
        """
        Remove a bag from a user's collection.

        Args:
            user_id: Authenticated user id
            bag_id: Bag id (not the saved-bag id)
        """
        logger.info("removing_user_bag", user_id=user_id, bag_id=bag_id)

        try:
            (
                self.db.table(self.table)
                .delete()
                .eq("user_id", user_id)
                .eq("bag_id", bag_id)
                .execute()
            )
            return True
        except Exception as e:
            logger.error("remove_user_bag_failed", user_id=user_id, error=str(e))
            raise DatabaseError("delete", str(e))


# Singleton instance
_user_bag_service: Optional[UserBagService] = None


def get_user_bag_service() -> UserBagService:
    """Get or create UserBagService instance."""
    global _user_bag_service
    if _user_bag_service is None:
        _user_bag_service = UserBagService()
    return _user_bag_service
