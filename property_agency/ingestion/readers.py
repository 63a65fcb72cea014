"""Readers for the pipe-delimited address and property files.

Address file, one record per line::

    unitNumber|streetNumber|streetName|postalCode|city

Property file, one record per line, laid out per variant::

    Residence:  priceUsd|numberOfBedrooms|swimmingPool|type|propertyId|strata
    Commercial: priceUsd|type|propertyId|loadingDock|highwayAccess
    Retail:     priceUsd|type|propertyId|squareFootage|customerParking

Line *i* of the address file is the address of property line *i*.
"""

import logging
from pathlib import Path
from typing import Iterator

from property_agency.exceptions import IngestionError, ValidationError
from property_agency.models import Address, Commercial, Property, PropertyType, Residence, Retail
from property_agency.store.agency import Agency

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"

ADDRESS_FIELD_COUNT = 5
UNIT_NUMBER_INDEX = 0
STREET_NUMBER_INDEX = 1
STREET_NAME_INDEX = 2
POSTAL_CODE_INDEX = 3
CITY_INDEX = 4

PRICE_USD_INDEX = 0

RESIDENCE_FIELD_COUNT = 6
RESIDENCE_NUMBER_OF_BEDROOMS_INDEX = 1
RESIDENCE_SWIMMING_POOL_INDEX = 2
RESIDENCE_TYPE_INDEX = 3
RESIDENCE_PROPERTY_ID_INDEX = 4
RESIDENCE_STRATA_INDEX = 5

COMMERCIAL_FIELD_COUNT = 5
COMMERCIAL_TYPE_INDEX = 1
COMMERCIAL_PROPERTY_ID_INDEX = 2
COMMERCIAL_LOADING_DOCK_INDEX = 3
COMMERCIAL_HIGHWAY_ACCESS_INDEX = 4

RETAIL_FIELD_COUNT = 5
RETAIL_TYPE_INDEX = 1
RETAIL_PROPERTY_ID_INDEX = 2
RETAIL_SQUARE_FOOTAGE_INDEX = 3
RETAIL_CUSTOMER_PARKING_INDEX = 4


def parse_bool(token: str) -> bool:
    """Parse a flag: ``"true"`` in any case is True, anything else False."""
    return token.strip().lower() == "true"


def _parse_int(token: str, field_name: str) -> int:
    try:
        return int(token.strip())
    except ValueError as exc:
        raise IngestionError(f"Invalid {field_name}: {token!r}") from exc


def _parse_float(token: str, field_name: str) -> float:
    try:
        return float(token.strip())
    except ValueError as exc:
        raise IngestionError(f"Invalid {field_name}: {token!r}") from exc


def _split(line: str, expected: int, record: str) -> list[str]:
    tokens = line.split(FIELD_SEPARATOR)
    if len(tokens) != expected:
        raise IngestionError(f"Expected {expected} fields for {record}, got {len(tokens)}")
    return tokens


def _is_type(tokens: list[str], index: int, property_type: PropertyType) -> bool:
    return len(tokens) > index and tokens[index].strip().lower() == property_type.value


def _iter_records(path: Path, encoding: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for each non-blank line in ``path``."""
    with open(path, encoding=encoding) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if line.strip():
                yield line_number, line


def parse_address_line(line: str) -> Address:
    """Build an ``Address`` from one address-file line."""
    tokens = _split(line, ADDRESS_FIELD_COUNT, "address")
    return Address(
        unit_number=tokens[UNIT_NUMBER_INDEX],
        street_number=_parse_int(tokens[STREET_NUMBER_INDEX], "street number"),
        street_name=tokens[STREET_NAME_INDEX],
        postal_code=tokens[POSTAL_CODE_INDEX],
        city=tokens[CITY_INDEX],
    )


def parse_property_line(line: str, address: Address) -> Property:
    """Build a typed property from one property-file line.

    The variant is picked from the type token: index 3 for residences,
    index 1 for commercial properties. Any other line is read as retail.

    Parameters
    ----------
    line : str
        Raw pipe-delimited line.
    address : Address
        Address paired with this line.

    Returns
    -------
    Property
        A ``Residence``, ``Commercial`` or ``Retail`` instance.

    Raises
    ------
    IngestionError
        If the field count is wrong or a number cannot be parsed.
    ValidationError
        If a parsed value violates a model constraint.
    """
    tokens = line.split(FIELD_SEPARATOR)

    if _is_type(tokens, RESIDENCE_TYPE_INDEX, PropertyType.RESIDENCE):
        tokens = _split(line, RESIDENCE_FIELD_COUNT, "residence")
        return Residence(
            price_usd=_parse_float(tokens[PRICE_USD_INDEX], "price"),
            address=address,
            number_of_bedrooms=_parse_int(
                tokens[RESIDENCE_NUMBER_OF_BEDROOMS_INDEX], "number of bedrooms"
            ),
            swimming_pool=parse_bool(tokens[RESIDENCE_SWIMMING_POOL_INDEX]),
            property_type=tokens[RESIDENCE_TYPE_INDEX],
            property_id=tokens[RESIDENCE_PROPERTY_ID_INDEX],
            strata=parse_bool(tokens[RESIDENCE_STRATA_INDEX]),
        )

    if _is_type(tokens, COMMERCIAL_TYPE_INDEX, PropertyType.COMMERCIAL):
        tokens = _split(line, COMMERCIAL_FIELD_COUNT, "commercial property")
        return Commercial(
            price_usd=_parse_float(tokens[PRICE_USD_INDEX], "price"),
            address=address,
            property_type=tokens[COMMERCIAL_TYPE_INDEX],
            property_id=tokens[COMMERCIAL_PROPERTY_ID_INDEX],
            loading_dock=parse_bool(tokens[COMMERCIAL_LOADING_DOCK_INDEX]),
            highway_access=parse_bool(tokens[COMMERCIAL_HIGHWAY_ACCESS_INDEX]),
        )

    tokens = _split(line, RETAIL_FIELD_COUNT, "retail property")
    return Retail(
        price_usd=_parse_float(tokens[PRICE_USD_INDEX], "price"),
        address=address,
        property_type=tokens[RETAIL_TYPE_INDEX],
        property_id=tokens[RETAIL_PROPERTY_ID_INDEX],
        square_footage=_parse_int(tokens[RETAIL_SQUARE_FOOTAGE_INDEX], "square footage"),
        customer_parking=parse_bool(tokens[RETAIL_CUSTOMER_PARKING_INDEX]),
    )


def read_address_data(path: str | Path, encoding: str = "utf-8") -> list[Address]:
    """Read every address in an address file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    IngestionError
        If a line is malformed; the message names file and line.
    ValidationError
        If a line holds an out-of-range value.
    """
    path = Path(path)
    addresses = []
    for line_number, line in _iter_records(path, encoding):
        try:
            addresses.append(parse_address_line(line))
        except IngestionError as exc:
            raise IngestionError(f"{path}:{line_number}: {exc}") from exc
        except ValidationError:
            logger.error(
                "Invalid address at %s:%d",
                path,
                line_number,
                extra={"path": str(path), "line": line_number},
            )
            raise
    logger.debug("Read %d addresses from %s", len(addresses), path)
    return addresses


def read_property_data(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read the raw, non-blank lines of a property file."""
    path = Path(path)
    lines = [line for _, line in _iter_records(path, encoding)]
    logger.debug("Read %d property lines from %s", len(lines), path)
    return lines


def load_agency(
    agency: Agency,
    address_path: str | Path,
    property_path: str | Path,
    encoding: str = "utf-8",
) -> int:
    """Load both data files into ``agency``.

    Property line *i* is paired with address line *i*. Every line is parsed
    before anything is added, so a failed load leaves ``agency`` untouched.

    Returns
    -------
    int
        Number of property records loaded.

    Raises
    ------
    IngestionError
        If the files hold different numbers of records or a line is malformed.
    ValidationError
        If a record violates a model constraint.
    """
    addresses = read_address_data(address_path, encoding)
    lines = read_property_data(property_path, encoding)

    if len(addresses) != len(lines):
        raise IngestionError(
            f"{property_path} has {len(lines)} records but {address_path} "
            f"has {len(addresses)} addresses"
        )

    properties = []
    for record, (line, address) in enumerate(zip(lines, addresses), start=1):
        try:
            properties.append(parse_property_line(line, address))
        except IngestionError as exc:
            raise IngestionError(f"{property_path}: record {record}: {exc}") from exc
        except ValidationError:
            logger.error(
                "Invalid property at %s: record %d",
                property_path,
                record,
                extra={"path": str(property_path), "record": record},
            )
            raise

    for prop in properties:
        agency.add_property(prop)

    logger.info(
        "Loaded %d properties into %s",
        len(properties),
        agency.name,
        extra={"agency": agency.name, "records": len(properties)},
    )
    return len(properties)
