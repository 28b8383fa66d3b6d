"""
Test data factories.

Uses factory pattern to generate consistent test data.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4


class AirlineFactory:
    """
    Factory for creating test Airline rows.

    Usage:
        # Create with defaults (18 x 14 x 8 in personal item)
        airline = AirlineFactory.create()

        # Create with overrides
        airline = AirlineFactory.create(iata_code="UA", pet_carrier_allowed=False)

        # Create multiple
        airlines = AirlineFactory.create_batch(3)
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        id: Optional[str] = None,
        name: Optional[str] = None,
        iata_code: Optional[str] = None,
        max_personal_item_length_cm: Optional[float] = 45.72,
        max_personal_item_width_cm: Optional[float] = 35.56,
        max_personal_item_height_cm: Optional[float] = 20.32,
        verification_status: str = "VERIFIED_OFFICIAL",
        pet_carrier_allowed: bool = True,
        pet_carrier_max_length_cm: Optional[float] = 45.72,
        pet_carrier_max_width_cm: Optional[float] = 27.94,
        pet_carrier_max_height_cm: Optional[float] = 22.86,
        **overrides
    ) -> dict:
        """
        Create a single airline dict.

        Args:
            id: Airline UUID (auto-generated if not provided)
            name: Airline name (auto-generated if not provided)
            iata_code: Two-letter code (auto-generated if not provided)
            max_personal_item_*_cm: Personal item envelope, None = unpublished
            pet_carrier_*: Pet carrier policy and envelope

        Returns:
            Dict matching the airlines table schema
        """
        counter = cls._next_counter()
        now = datetime.utcnow().isoformat() + "Z"

        airline = {
            "id": id or str(uuid4()),
            "name": name or f"Test Airline {counter}",
            "iata_code": iata_code or f"{chr(65 + counter % 26)}{counter % 10}",
            "logo_url": None,
            "max_personal_item_length_cm": max_personal_item_length_cm,
            "max_personal_item_width_cm": max_personal_item_width_cm,
            "max_personal_item_height_cm": max_personal_item_height_cm,
            "verification_status": verification_status,
            "source_url": None,
            "last_verified_date": None,
            "conflict_notes": None,
            "pet_carrier_allowed": pet_carrier_allowed,
            "pet_carrier_max_length_cm": pet_carrier_max_length_cm,
            "pet_carrier_max_width_cm": pet_carrier_max_width_cm,
            "pet_carrier_max_height_cm": pet_carrier_max_height_cm,
            "created_at": now,
            "updated_at": now,
        }
        airline.update(overrides)
        return airline

    @classmethod
    def create_batch(cls, count: int, **kwargs) -> list[dict]:
        """Create multiple airline dicts."""
        return [cls.create(**kwargs) for _ in range(count)]


class BagFactory:
    """
    Factory for creating test Bag rows.

    Usage:
        bag = BagFactory.create(brand="Sherpa", model="Original Deluxe")
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        id: Optional[str] = None,
        brand: str = "TestBrand",
        model: Optional[str] = None,
        length_cm: float = 40.0,
        width_cm: float = 30.0,
        height_cm: float = 20.0,
        is_pet_carrier: bool = False,
        **overrides
    ) -> dict:
        """Create a single bag dict."""
        counter = cls._next_counter()
        now = datetime.utcnow().isoformat() + "Z"

        bag = {
            "id": id or str(uuid4()),
            "brand": brand,
            "model": model or f"Model {counter}",
            "length_cm": length_cm,
            "width_cm": width_cm,
            "height_cm": height_cm,
            "is_pet_carrier": is_pet_carrier,
            "carrier_type": None,
            "is_verified": False,
            "image_url": None,
            "source_url": None,
            "created_at": now,
            "updated_at": now,
        }
        bag.update(overrides)
        return bag
