"""Flat-file ingestion into an agency."""

from property_agency.ingestion.readers import (
    load_agency,
    parse_address_line,
    parse_bool,
    parse_property_line,
    read_address_data,
    read_property_data,
)
from property_agency.ingestion.writers import (
    format_address_line,
    format_property_line,
    write_data_files,
)

__all__ = [
    "format_address_line",
    "format_property_line",
    "load_agency",
    "parse_address_line",
    "parse_bool",
    "parse_property_line",
    "read_address_data",
    "read_property_data",
    "write_data_files",
]
