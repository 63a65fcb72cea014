"""Base models and field checks shared across the property domain."""

from dataclasses import dataclass
from typing import Any

from property_agency.exceptions import InvalidFieldError, MissingFieldError


def require(value: Any, field_name: str) -> Any:
    """Return ``value`` unchanged, raising ``MissingFieldError`` if it is None."""
    if value is None:
        raise MissingFieldError(f"Invalid {field_name}: None")
    return value


def check_text(
    value: str | None,
    field_name: str,
    min_length: int = 0,
    max_length: int | None = None,
    allow_blank: bool = True,
) -> None:
    """Validate a string field's presence, length and blankness.

    Parameters
    ----------
    value : str | None
        Value under test.
    field_name : str
        Human-readable field name used in error messages.
    min_length : int
        Inclusive lower bound on ``len(value)``.
    max_length : int | None
        Inclusive upper bound on ``len(value)``; ``None`` for unbounded.
    allow_blank : bool
        Whether a whitespace-only value is acceptable.

    Raises
    ------
    MissingFieldError
        If ``value`` is None.
    InvalidFieldError
        If ``value`` is not a string or violates a bound.
    """
    require(value, field_name)
    if not isinstance(value, str):
        raise InvalidFieldError(f"Invalid {field_name}: {value!r}")
    if len(value) < min_length or (max_length is not None and len(value) > max_length):
        raise InvalidFieldError(f"Invalid {field_name}: {value!r}")
    if not allow_blank and not value.strip():
        raise InvalidFieldError(f"Invalid {field_name}: {value!r}")


def check_int(
    value: int | None,
    field_name: str,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    """Validate an integer field against inclusive bounds."""
    require(value, field_name)
    # bool is an int subclass; True bedrooms is a bug, not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(f"Invalid {field_name}: {value!r}")
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise InvalidFieldError(f"Invalid {field_name}: {value}")


def check_flag(value: bool | None, field_name: str) -> None:
    """Validate a boolean amenity flag."""
    require(value, field_name)
    if not isinstance(value, bool):
        raise InvalidFieldError(f"Invalid {field_name}: {value!r}")


@dataclass(frozen=True)
class Address:
    """Postal address of a property.

    Immutable value; equality is by value. Every field is validated at
    construction so an ``Address`` that exists is always well-formed:

    - unit_number: 1-4 characters
    - street_number: 0-999999
    - street_name: non-blank, at most 20 characters
    - postal_code: 5-6 characters
    - city: non-blank, at most 30 characters
    """

    UNIT_NUMBER_LENGTH = (1, 4)
    STREET_NUMBER_RANGE = (0, 999_999)
    STREET_NAME_MAX_LENGTH = 20
    POSTAL_CODE_LENGTH = (5, 6)
    CITY_MAX_LENGTH = 30

    unit_number: str
    street_number: int
    street_name: str
    postal_code: str
    city: str

    def __post_init__(self) -> None:
        check_int(self.street_number, "street number", *self.STREET_NUMBER_RANGE)
        check_text(
            self.street_name,
            "street name",
            max_length=self.STREET_NAME_MAX_LENGTH,
            allow_blank=False,
        )
        check_text(self.city, "city", max_length=self.CITY_MAX_LENGTH, allow_blank=False)
        check_text(self.postal_code, "postal code", *self.POSTAL_CODE_LENGTH)
        check_text(self.unit_number, "unit number", *self.UNIT_NUMBER_LENGTH)

    def __str__(self) -> str:
        return (
            f"Address [unitNumber: {self.unit_number}, streetNumber: {self.street_number}, "
            f"streetName: {self.street_name}, postalCode: {self.postal_code}, city: {self.city}]"
        )
