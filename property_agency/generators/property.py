"""Generate synthetic properties for sample portfolios."""

from __future__ import annotations

from typing import Iterator

from property_agency.generators.address import AddressFactory
from property_agency.generators.base import DEFAULT_LOCALE, BaseGenerator
from property_agency.models import Commercial, PropertyType, Residence, Retail
from property_agency.models.property import AnyProperty

ID_PREFIXES = {
    PropertyType.RESIDENCE: "R",
    PropertyType.COMMERCIAL: "C",
    PropertyType.RETAIL: "T",
}

# Relative frequency of each variant in a generated portfolio
TYPE_WEIGHTS = {
    PropertyType.RESIDENCE: 0.6,
    PropertyType.COMMERCIAL: 0.2,
    PropertyType.RETAIL: 0.2,
}


class PropertyGenerator(BaseGenerator):
    """Generate valid residence, commercial and retail properties.

    Property ids are a one-letter variant prefix plus a five-digit
    sequence number (``R00001``), so ids are unique per generator.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale used for addresses.
    """

    def __init__(self, seed: int | None = None, locale: str = DEFAULT_LOCALE) -> None:
        super().__init__(seed, locale)
        self._address_factory = AddressFactory(seed=seed, locale=locale)
        self._sequence = 0

    def _next_id(self, property_type: PropertyType) -> str:
        self._sequence += 1
        return f"{ID_PREFIXES[property_type]}{self._sequence:05d}"

    def _price(self, low_thousands: int, high_thousands: int) -> float:
        return float(self.random.randint(low_thousands, high_thousands) * 1000)

    def generate_residence(self) -> Residence:
        """Generate a residence."""
        return Residence(
            price_usd=self._price(300, 3500),
            address=self._address_factory.generate(),
            property_id=self._next_id(PropertyType.RESIDENCE),
            number_of_bedrooms=self.random.randint(1, 6),
            swimming_pool=self.random.random() < 0.2,
            strata=self.random.random() < 0.5,
        )

    def generate_commercial(self) -> Commercial:
        """Generate a commercial property."""
        return Commercial(
            price_usd=self._price(500, 8000),
            address=self._address_factory.generate(),
            property_id=self._next_id(PropertyType.COMMERCIAL),
            loading_dock=self.random.random() < 0.5,
            highway_access=self.random.random() < 0.4,
        )

    def generate_retail(self) -> Retail:
        """Generate a retail property."""
        return Retail(
            price_usd=self._price(250, 4000),
            address=self._address_factory.generate(),
            property_id=self._next_id(PropertyType.RETAIL),
            square_footage=self.random.randrange(500, 20000, 50),
            customer_parking=self.random.random() < 0.5,
        )

    def generate(self, property_type: PropertyType | str | None = None) -> AnyProperty:
        """Generate a property, optionally of a specific type.

        Parameters
        ----------
        property_type : PropertyType | str | None
            Variant to generate. If ``None``, picks one using ``TYPE_WEIGHTS``.

        Returns
        -------
        AnyProperty
            Generated property.
        """
        if property_type is None:
            property_type = self.random.choices(
                list(TYPE_WEIGHTS), weights=list(TYPE_WEIGHTS.values()), k=1
            )[0]
        else:
            property_type = PropertyType.parse(property_type)

        if property_type is PropertyType.RESIDENCE:
            return self.generate_residence()
        if property_type is PropertyType.COMMERCIAL:
            return self.generate_commercial()
        return self.generate_retail()

    def generate_batch(self, count: int) -> Iterator[AnyProperty]:
        """Generate ``count`` properties of mixed types."""
        for _ in range(count):
            yield self.generate()
