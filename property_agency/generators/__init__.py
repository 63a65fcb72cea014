"""Sample data generators."""

from property_agency.generators.address import AddressFactory
from property_agency.generators.property import PropertyGenerator

__all__ = ["AddressFactory", "PropertyGenerator"]
