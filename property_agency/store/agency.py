"""Agency: in-memory property portfolio and its query operations."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from property_agency.models import (
    Address,
    Commercial,
    Property,
    PropertyType,
    Residence,
    Retail,
)
from property_agency.models.base import check_text

logger = logging.getLogger(__name__)


def title_case(text: str) -> str:
    """Capitalize the first letter of each word and lower-case the rest.

    Words are split on whitespace and re-joined with single spaces.

    >>> title_case("  main   STREET ")
    'Main Street'
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


@dataclass
class Agency:
    """In-memory store of an agency's properties, keyed by property id.

    Queries are linear scans that never mutate the store. Empty results are
    always empty containers. Result order follows insertion order.
    Every agency starts empty with its own ``properties`` dict, which is
    filled only through ``add_property``.
    """

    NAME_LENGTH = (1, 30)

    name: str
    properties: dict[str, Property] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        check_text(self.name, "agency name", *self.NAME_LENGTH)

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self.properties

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties.values())

    # Mutations
    def add_property(self, prop: Property | None) -> None:
        """Add a property, replacing any stored property with the same id.

        ``None`` and properties without an id are ignored.
        """
        if prop is None or prop.property_id is None:
            return
        context = {"agency": self.name, "property_id": prop.property_id}
        if prop.property_id in self.properties:
            logger.debug("Replacing property %s", prop.property_id, extra=context)
        else:
            logger.debug("Adding property %s", prop.property_id, extra=context)
        self.properties[prop.property_id] = prop

    def remove_property(self, property_id: str) -> None:
        """Remove a property by id. Unknown ids are ignored."""
        if self.properties.pop(property_id, None) is not None:
            logger.debug(
                "Removed property %s",
                property_id,
                extra={"agency": self.name, "property_id": property_id},
            )

    # Query methods
    def get_property(self, property_id: str) -> Property | None:
        """Get a property by id, or None if there is no such property."""
        return self.properties.get(property_id)

    def get_total_property_values(self) -> int:
        """Total asking price of all properties in whole USD.

        The running total is truncated to an integer after each addition,
        so fractional cents never accumulate: 100.40 + 200.60 gives 300.
        """
        total = 0
        for prop in self.properties.values():
            total = int(total + prop.price_usd)
        return total

    def get_properties_between(self, min_usd: float, max_usd: float) -> list[Property]:
        """Get properties priced within ``[min_usd, max_usd]``."""
        return [p for p in self.properties.values() if min_usd <= p.price_usd <= max_usd]

    def get_properties_on(self, street_name: str) -> list[Address]:
        """Get the addresses of properties on a street (exact, case-sensitive)."""
        return [
            p.address for p in self.properties.values() if p.address.street_name == street_name
        ]

    def get_properties_of_type(self, property_type: PropertyType | str) -> list[Property]:
        """Get properties of a type, matched case-insensitively.

        An unknown type name matches nothing.
        """
        wanted = property_type.value if isinstance(property_type, PropertyType) else property_type
        wanted = wanted.strip().lower()
        return [p for p in self.properties.values() if p.property_type.value == wanted]

    def get_properties_with_pools(self) -> list[Residence]:
        """Get residences with a swimming pool."""
        return [r for r in self._residences() if r.swimming_pool]

    def get_properties_with_bedrooms(self, min_bedrooms: int, max_bedrooms: int) -> dict[str, Residence]:
        """Get residences with ``min_bedrooms..max_bedrooms`` bedrooms, keyed by id."""
        return {
            r.property_id: r
            for r in self._residences()
            if min_bedrooms <= r.number_of_bedrooms <= max_bedrooms
        }

    def get_properties_with_strata(self) -> list[Residence]:
        """Get residences that are strata."""
        return [r for r in self._residences() if r.strata]

    def get_properties_with_loading_docks(self) -> list[Commercial]:
        """Get commercial properties with a loading dock."""
        return [c for c in self._commercials() if c.loading_dock]

    def get_properties_with_highway_access(self) -> list[Commercial]:
        """Get commercial properties with highway access."""
        return [c for c in self._commercials() if c.highway_access]

    def get_properties_square_footage(self, square_footage: int) -> list[Retail]:
        """Get retail properties with exactly ``square_footage`` square feet."""
        return [r for r in self._retails() if r.square_footage == square_footage]

    def get_properties_with_customer_parking(self) -> list[Retail]:
        """Get retail properties with customer parking."""
        return [r for r in self._retails() if r.customer_parking]

    def summary(self) -> dict[str, int]:
        """Return property counts per type and in total."""
        counts = {property_type.value: 0 for property_type in PropertyType}
        for prop in self.properties.values():
            counts[prop.property_type.value] += 1
        counts["total"] = len(self.properties)
        return counts

    title_case = staticmethod(title_case)

    def _residences(self) -> Iterator[Residence]:
        return (p for p in self.properties.values() if isinstance(p, Residence))

    def _commercials(self) -> Iterator[Commercial]:
        return (p for p in self.properties.values() if isinstance(p, Commercial))

    def _retails(self) -> Iterator[Retail]:
        return (p for p in self.properties.values() if isinstance(p, Retail))
