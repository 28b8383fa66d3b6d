"""
Shared test fixtures.
"""

import os
import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are loaded at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

import pytest
from unittest.mock import patch
from datetime import datetime
from typing import Generator

# ===================
# MOCK SUPABASE CLIENT
# ===================

SERVICE_MODULES = [
    "services.airline_service",
    "services.bag_service",
    "services.user_bag_service",
    "services.bag_check_service",
]


class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockSupabaseQuery:
    """Mock Supabase query builder with chainable methods."""

    def __init__(self, data: list = None, count: int = None):
        self._data = data or []
        self._count = count

    def select(self, *args, **kwargs):
        return self

    def insert(self, data):
        # Simulate insert - add id and timestamps
        if isinstance(data, dict):
            data = [data]
        for item in data:
            item.setdefault("id", "test-uuid-123")
            item["created_at"] = datetime.utcnow().isoformat() + "Z"
            item["updated_at"] = datetime.utcnow().isoformat() + "Z"
        self._data = data
        self._count = None
        return self

    def update(self, data):
        # Simulate update - merge with existing data
        updated_data = []
        for item in self._data:
            merged = {**item, **data}
            merged["updated_at"] = datetime.utcnow().isoformat() + "Z"
            updated_data.append(merged)
        self._data = updated_data if updated_data else [data]
        return self

    def delete(self):
        return self

    def eq(self, column, value):
        return self

    def order(self, column, **kwargs):
        return self

    def execute(self) -> MockSupabaseResponse:
        return MockSupabaseResponse(
            data=self._data,
            count=self._count if self._count is not None else len(self._data)
        )


class MockSupabaseTable:
    """Mock Supabase table with configurable responses."""

    def __init__(self, name: str, data: list = None, count: int = None, calls: list = None):
        self._name = name
        self._data = data or []
        self._count = count
        self._calls = calls if calls is not None else []

    def _query(self) -> MockSupabaseQuery:
        return MockSupabaseQuery([dict(row) for row in self._data], self._count)

    def select(self, *args, **kwargs):
        self._calls.append((self._name, "select", args))
        return self._query()

    def insert(self, data):
        self._calls.append((self._name, "insert", data))
        return self._query().insert(data)

    def update(self, data):
        self._calls.append((self._name, "update", data))
        return self._query().update(data)

    def delete(self):
        self._calls.append((self._name, "delete", None))
        return self._query()


class MockSupabaseClient:
    """Mock Supabase client."""

    def __init__(self):
        self._tables = {}
        self.calls = []

    def set_table_data(self, table_name: str, data: list, count: int = None):
        """Configure mock data for a table."""
        self._tables[table_name] = {"data": data, "count": count}

    def table(self, name: str) -> MockSupabaseTable:
        """Get mock table."""
        config = self._tables.get(name, {"data": [], "count": None})
        return MockSupabaseTable(name, config["data"], config["count"], self.calls)

    def calls_for(self, table_name: str, operation: str) -> list:
        """Payloads passed to one operation on one table, in call order."""
        return [
            payload for name, op, payload in self.calls
            if name == table_name and op == operation
        ]


# ===================
# FIXTURES
# ===================

@pytest.fixture(autouse=True)
def reset_service_singletons():
    """Drop cached service instances so each test binds its own client."""
    import services.airline_service
    import services.bag_service
    import services.user_bag_service
    import services.bag_check_service

    services.airline_service._airline_service = None
    services.bag_service._bag_service = None
    services.user_bag_service._user_bag_service = None
    services.bag_check_service._bag_check_service = None
    yield


@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("airlines", [
                {"id": "1", "iata_code": "AA", ...}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase) -> Generator:
    """
    Patch the database client with mock.

    Usage:
        def test_something(mock_db, mock_supabase):
            mock_supabase.set_table_data("airlines", [...])
            # Now any code using get_supabase_client() gets the mock
    """
    patches = [patch("config.database.get_supabase_client", return_value=mock_supabase)]
    patches += [
        patch(f"{module}.get_supabase_client", return_value=mock_supabase)
        for module in SERVICE_MODULES
    ]

    for p in patches:
        p.start()
    try:
        yield mock_supabase
    finally:
        for p in reversed(patches):
            p.stop()


@pytest.fixture
def sample_airline_data() -> dict:
    """American Airlines as stored."""
    return {
        "id": "airline-uuid-aa",
        "name": "American Airlines",
        "iata_code": "AA",
        "logo_url": None,
        "max_personal_item_length_cm": 45.72,
        "max_personal_item_width_cm": 35.56,
        "max_personal_item_height_cm": 20.32,
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.aa.com/i18n/travel-info/baggage/carry-on-baggage.jsp",
        "last_verified_date": "2025-11-01T00:00:00Z",
        "conflict_notes": None,
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 48.26,
        "pet_carrier_max_width_cm": 27.94,
        "pet_carrier_max_height_cm": 22.86,
        "created_at": "2025-11-01T00:00:00Z",
        "updated_at": None
    }


@pytest.fixture
def sample_bag_data() -> dict:
    """A catalog pet carrier."""
    return {
        "id": "bag-uuid-1",
        "brand": "Sherpa",
        "model": "Original Deluxe Medium",
        "length_cm": 43.18,
        "width_cm": 27.94,
        "height_cm": 27.94,
        "is_pet_carrier": True,
        "carrier_type": "soft-sided",
        "is_verified": True,
        "image_url": None,
        "source_url": None,
        "created_at": "2025-11-01T00:00:00Z",
        "updated_at": None
    }


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client_with_mock_db(mock_db):
    """
    Create FastAPI test client with mocked database.

    Usage:
        def test_endpoint(test_client_with_mock_db, mock_supabase):
            mock_supabase.set_table_data("airlines", [...])
            response = test_client_with_mock_db.get("/api/airlines")
    """
    from fastapi.testclient import TestClient
    from main import app

    # Not used as a context manager: startup seeding stays off
    yield TestClient(app)
