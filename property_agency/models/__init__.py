"""Domain models for the agency portfolio."""

from property_agency.models.base import Address
from property_agency.models.enums import PropertyType
from property_agency.models.property import (
    AnyProperty,
    Commercial,
    Property,
    Residence,
    Retail,
)

__all__ = [
    "Address",
    "AnyProperty",
    "Commercial",
    "Property",
    "PropertyType",
    "Residence",
    "Retail",
]
