"""Format models back into the pipe-delimited file layout."""

import logging
from pathlib import Path
from typing import Iterable

from property_agency.ingestion.readers import FIELD_SEPARATOR
from property_agency.models import Address, Commercial, Property, Residence, Retail

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_address_line(address: Address) -> str:
    """Format an address as an address-file line."""
    return FIELD_SEPARATOR.join(
        [
            address.unit_number,
            str(address.street_number),
            address.street_name,
            address.postal_code,
            address.city,
        ]
    )


def format_property_line(prop: Property) -> str:
    """Format a property as a property-file line in its variant's layout."""
    if not isinstance(prop, (Residence, Commercial, Retail)):
        raise TypeError(f"Unsupported property class: {type(prop).__name__}")

    price = repr(prop.price_usd)
    type_tag = prop.property_type.value

    if isinstance(prop, Residence):
        fields = [
            price,
            str(prop.number_of_bedrooms),
            _flag(prop.swimming_pool),
            type_tag,
            prop.property_id,
            _flag(prop.strata),
        ]
    elif isinstance(prop, Commercial):
        fields = [
            price,
            type_tag,
            prop.property_id,
            _flag(prop.loading_dock),
            _flag(prop.highway_access),
        ]
    else:
        fields = [
            price,
            type_tag,
            prop.property_id,
            str(prop.square_footage),
            _flag(prop.customer_parking),
        ]

    return FIELD_SEPARATOR.join(fields)


def write_data_files(
    properties: Iterable[Property],
    address_path: str | Path,
    property_path: str | Path,
    encoding: str = "utf-8",
) -> int:
    """Write properties and their addresses as a matching pair of files.

    Every line is formatted before either file is opened, so a property
    that cannot be formatted leaves both files untouched.

    Returns
    -------
    int
        Number of records written.

    Raises
    ------
    TypeError
        If an item is not a ``Residence``, ``Commercial`` or ``Retail``.
    """
    address_path = Path(address_path)
    property_path = Path(property_path)

    address_lines = []
    property_lines = []
    for prop in properties:
        property_lines.append(format_property_line(prop))
        address_lines.append(format_address_line(prop.address))

    with open(address_path, "w", encoding=encoding) as f:
        f.writelines(line + "\n" for line in address_lines)

    with open(property_path, "w", encoding=encoding) as f:
        f.writelines(line + "\n" for line in property_lines)

    logger.info(
        "Wrote %d records to %s and %s",
        len(property_lines),
        address_path,
        property_path,
        extra={"path": str(property_path), "records": len(property_lines)},
    )
    return len(property_lines)
