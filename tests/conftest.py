"""Pytest configuration and fixtures."""

import pytest

from property_agency.models import Address, Commercial, Residence, Retail
from property_agency.store import Agency


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_address() -> Address:
    """Sample valid address."""
    return Address(
        unit_number="12",
        street_number=1500,
        street_name="Main Street",
        postal_code="V6B1A1",
        city="Vancouver",
    )


@pytest.fixture
def make_residence(sample_address: Address):
    """Factory for residences with overridable fields."""

    def _make(**overrides) -> Residence:
        fields = {
            "price_usd": 750000.0,
            "address": sample_address,
            "property_id": "R1",
            "number_of_bedrooms": 3,
            "swimming_pool": False,
            "strata": False,
        }
        fields.update(overrides)
        return Residence(**fields)

    return _make


@pytest.fixture
def make_commercial(sample_address: Address):
    """Factory for commercial properties with overridable fields."""

    def _make(**overrides) -> Commercial:
        fields = {
            "price_usd": 2000000.0,
            "address": sample_address,
            "property_id": "C1",
            "loading_dock": False,
            "highway_access": False,
        }
        fields.update(overrides)
        return Commercial(**fields)

    return _make


@pytest.fixture
def make_retail(sample_address: Address):
    """Factory for retail properties with overridable fields."""

    def _make(**overrides) -> Retail:
        fields = {
            "price_usd": 900000.0,
            "address": sample_address,
            "property_id": "T1",
            "square_footage": 1200,
            "customer_parking": False,
        }
        fields.update(overrides)
        return Retail(**fields)

    return _make


@pytest.fixture
def agency() -> Agency:
    """Create a fresh, empty agency for each test."""
    return Agency(name="VancoVista")
