"""Enumeration types for property domain entities."""

from enum import Enum

from property_agency.exceptions import InvalidFieldError, MissingFieldError


class PropertyType(str, Enum):
    RESIDENCE = "residence"
    COMMERCIAL = "commercial"
    RETAIL = "retail"

    @classmethod
    def parse(cls, value: "PropertyType | str | None") -> "PropertyType":
        """Resolve a type tag, matching strings case-insensitively.

        Raises
        ------
        MissingFieldError
            If ``value`` is None.
        InvalidFieldError
            If ``value`` names no known property type.
        """
        if value is None:
            raise MissingFieldError("Invalid property type: None")
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise InvalidFieldError(f"Invalid property type: {value!r}") from None
        raise InvalidFieldError(f"Invalid property type: {value!r}")
