"""
Unit tests for BagService.

Run: pytest tests/unit/test_bag_service.py -v
"""

import pytest
from unittest.mock import patch

from services.bag_service import (
    BagService,
    MAX_SEARCH_RESULTS,
    NOT_FOUND_MESSAGE,
    SEARCH_UNAVAILABLE_MESSAGE,
)
from models.bag import BagCreate
from exceptions import BagNotFoundError, BagSearchError
from tests.factories import BagFactory


class TestBagServiceRead:
    """Tests for listing and lookup."""

    def test_get_all(self, mock_db, mock_supabase):
        """Should return every bag."""
        mock_supabase.set_table_data("bags", [BagFactory.create() for _ in range(3)])
        service = BagService()

        bags = service.get_all()

        assert len(bags) == 3

    def test_get_by_id(self, mock_db, mock_supabase, sample_bag_data):
        """Should return the bag for a known id."""
        mock_supabase.set_table_data("bags", [sample_bag_data])
        service = BagService()

        bag = service.get_by_id("bag-uuid-1")

        assert bag.brand == "Sherpa"
        assert bag.is_pet_carrier is True

    def test_get_by_id_not_found(self, mock_db, mock_supabase):
        """Should raise BagNotFoundError for unknown ids."""
        mock_supabase.set_table_data("bags", [])
        service = BagService()

        with pytest.raises(BagNotFoundError) as exc_info:
            service.get_by_id("missing")

        assert exc_info.value.status_code == 404


class TestBagServiceCreate:
    """Tests for create()"""

    def test_create_bag(self, mock_db, mock_supabase):
        """Should insert and return the bag."""
        service = BagService()

        bag = service.create(BagCreate(
            brand="Sherpa",
            model="Original Deluxe",
            length_cm=43.18,
            width_cm=27.94,
            height_cm=27.94,
            is_pet_carrier=True,
            carrier_type="soft-sided",
        ))

        assert bag.id == "test-uuid-123"
        inserted = mock_supabase.calls_for("bags", "insert")[0]
        assert inserted["carrier_type"] == "soft-sided"
        assert inserted["length_cm"] == 43.18

    @pytest.mark.parametrize("length", [0, -5, float("inf"), float("nan")])
    def test_rejects_invalid_dimensions(self, length):
        """Should reject non-positive or non-finite dimensions."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            BagCreate(length_cm=length, width_cm=20, height_cm=20)


class TestBagServiceSearch:
    """Tests for search()"""

    def test_catalog_match_by_model_fragment(self, mock_db, mock_supabase):
        """Should match the model case-insensitively as a substring."""
        mock_supabase.set_table_data("bags", [
            BagFactory.create(brand="Sherpa", model="Original Deluxe Medium"),
        ])
        service = BagService()

        with patch("services.bag_service.search_bag_dimensions") as mock_search:
            result = service.search("Sherpa", "deluxe")

        assert result.found is True
        assert result.bag.model == "Original Deluxe Medium"
        assert result.search_results == []
        mock_search.assert_not_called()

    def test_falls_back_to_web_search(self, mock_db, mock_supabase):
        """Should return at most three web results when the catalog misses."""
        mock_supabase.set_table_data("bags", [
            BagFactory.create(brand="Sherpa", model="Original Deluxe"),
        ])
        items = [
            {"title": f"Result {i}", "link": f"https://example.com/{i}", "snippet": "18 x 11 x 11"}
            for i in range(5)
        ]
        service = BagService()

        with patch("services.bag_service.search_bag_dimensions", return_value=items) as mock_search:
            result = service.search("Sherpa", "Travel Tote")

        mock_search.assert_called_once_with("Sherpa", "Travel Tote")
        assert result.found is False
        assert result.bag is None
        assert result.message == NOT_FOUND_MESSAGE
        assert len(result.search_results) == MAX_SEARCH_RESULTS
        assert result.search_results[0].link == "https://example.com/0"

    def test_web_search_failure_is_reported_not_raised(self, mock_db, mock_supabase):
        """Should report an unavailable search in the message."""
        mock_supabase.set_table_data("bags", [])
        service = BagService()

        with patch(
            "services.bag_service.search_bag_dimensions",
            side_effect=BagSearchError("Google Custom Search API credentials not configured")
        ):
            result = service.search("Unknown", "Bag")

        assert result.found is False
        assert result.message == SEARCH_UNAVAILABLE_MESSAGE
        assert result.search_results == []

    def test_web_result_without_snippet(self, mock_db, mock_supabase):
        """Should accept items that have no snippet."""
        mock_supabase.set_table_data("bags", [])
        service = BagService()

        with patch(
            "services.bag_service.search_bag_dimensions",
            return_value=[{"title": "Spec sheet", "link": "https://example.com/spec"}]
        ):
            result = service.search("Brand", "Model")

        assert result.search_results[0].snippet is None
