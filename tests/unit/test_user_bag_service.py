"""
Unit tests for UserBagService.

Run: pytest tests/unit/test_user_bag_service.py -v
"""

import pytest

from services.user_bag_service import UserBagService
from models.user_bag import UserBagCreate, UserBagUpdate
from exceptions import UserBagNotFoundError


USER_ID = "user-123"


@pytest.fixture
def saved_bag_row(sample_bag_data) -> dict:
    """A saved bag joined with its catalog bag."""
    return {
        "id": "user-bag-1",
        "user_id": USER_ID,
        "bag_id": "bag-uuid-1",
        "custom_name": "Cat carrier",
        "created_at": "2025-11-02T00:00:00Z",
        "bag": sample_bag_data,
    }


class TestUserBagService:
    """Tests for the saved bag collection."""

    def test_get_for_user_joins_bag(self, mock_db, mock_supabase, saved_bag_row):
        """Should return saved bags with the embedded bag."""
        mock_supabase.set_table_data("user_bags", [saved_bag_row])
        service = UserBagService()

        user_bags = service.get_for_user(USER_ID)

        assert len(user_bags) == 1
        assert user_bags[0].custom_name == "Cat carrier"
        assert user_bags[0].bag.brand == "Sherpa"
        assert mock_supabase.calls_for("user_bags", "select")[0] == ("*, bag:bags(*)",)

    def test_add_records_user(self, mock_db, mock_supabase):
        """Should insert with the caller's user id."""
        service = UserBagService()

        user_bag = service.add(USER_ID, UserBagCreate(bag_id="bag-uuid-1", custom_name="Weekend"))

        assert user_bag.user_id == USER_ID
        assert user_bag.bag_id == "bag-uuid-1"
        inserted = mock_supabase.calls_for("user_bags", "insert")[0]
        assert inserted["user_id"] == USER_ID
        assert inserted["custom_name"] == "Weekend"

    def test_add_without_custom_name(self, mock_db, mock_supabase):
        """Should allow saving without a custom name."""
        service = UserBagService()

        user_bag = service.add(USER_ID, UserBagCreate(bag_id="bag-uuid-1"))

        assert user_bag.custom_name is None

    def test_rename(self, mock_db, mock_supabase, saved_bag_row):
        """Should update only the custom name."""
        row = {k: v for k, v in saved_bag_row.items() if k != "bag"}
        mock_supabase.set_table_data("user_bags", [row])
        service = UserBagService()

        user_bag = service.rename(USER_ID, "user-bag-1", UserBagUpdate(custom_name="Dog carrier"))

        assert user_bag.custom_name == "Dog carrier"
        assert mock_supabase.calls_for("user_bags", "update") == [{"custom_name": "Dog carrier"}]

    def test_rename_missing_raises(self, mock_db, mock_supabase):
        """Should raise UserBagNotFoundError when nothing matches."""
        mock_supabase.set_table_data("user_bags", [])
        service = UserBagService()

        with pytest.raises(UserBagNotFoundError) as exc_info:
            service.rename(USER_ID, "other-user-bag", UserBagUpdate(custom_name="Mine"))

        assert exc_info.value.status_code == 404
        assert mock_supabase.calls_for("user_bags", "update") == []

    def test_rename_rejects_empty_name(self):
        """Should require a non-empty custom name."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            UserBagUpdate(custom_name="   ")

    def test_remove(self, mock_db, mock_supabase):
        """Should delete by user and bag id."""
        service = UserBagService()

        assert service.remove(USER_ID, "bag-uuid-1") is True
        assert len(mock_supabase.calls_for("user_bags", "delete")) == 1
