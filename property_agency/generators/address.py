"""Address generation factory."""

from __future__ import annotations

from property_agency.generators.base import BaseGenerator
from property_agency.models import Address

# Faker values are trimmed to the Address field limits
_STREET_NAME_FALLBACK = "Main St"
_CITY_FALLBACK = "Vancouver"


class AddressFactory(BaseGenerator):
    """Generate realistic, always-valid addresses.

    Uses Faker's ``en_CA`` provider by default, so postal codes look like
    ``V6B1A1`` once the separating space is removed.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale.
    """

    def generate(self) -> Address:
        """Generate an address.

        Returns
        -------
        Address
            Generated address.
        """
        street_name = self.fake.street_name()[: Address.STREET_NAME_MAX_LENGTH].strip()
        city = self.fake.city()[: Address.CITY_MAX_LENGTH].strip()

        min_postal, max_postal = Address.POSTAL_CODE_LENGTH
        postal_code = self.fake.postcode().replace(" ", "")[:max_postal].ljust(min_postal, "0")

        return Address(
            unit_number=str(self.random.randint(1, 9999)),
            street_number=self.random.randint(1, 99999),
            street_name=street_name or _STREET_NAME_FALLBACK,
            postal_code=postal_code,
            city=city or _CITY_FALLBACK,
        )
