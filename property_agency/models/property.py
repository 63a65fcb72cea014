"""Property models: the base listing and its residence, commercial and retail variants."""

from dataclasses import dataclass
from typing import ClassVar

from property_agency.exceptions import InvalidFieldError
from property_agency.models.base import Address, check_flag, check_int, check_text, require
from property_agency.models.enums import PropertyType


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _lower_bool(flag: bool) -> str:
    return "true" if flag else "false"


@dataclass(frozen=True, eq=False, kw_only=True)
class Property:
    """Real estate property tracked by an agency.

    Abstract: only ``Residence``, ``Commercial`` and ``Retail`` can be
    built, so a property's type tag always names its concrete class.

    All fields are fixed at construction except the price, which changes
    only through ``set_price_usd``. Properties are entities: two instances
    compare equal only if they are the same object.

    Parameters
    ----------
    price_usd : float
        Asking price in USD, at least 0.
    address : Address
        Postal address (required).
    property_id : str
        Agency-unique identifier, 1-6 characters.
    property_type : PropertyType | str | None
        Type tag, matched case-insensitively. Variants fill in their own
        tag when omitted and reject a tag that names another variant.
    """

    PROPERTY_TYPE: ClassVar[PropertyType | None] = None
    MIN_PRICE_USD: ClassVar[float] = 0
    PROPERTY_ID_LENGTH: ClassVar[tuple[int, int]] = (1, 6)

    price_usd: float
    address: Address
    property_id: str
    property_type: PropertyType | str | None = None

    def __post_init__(self) -> None:
        if self.PROPERTY_TYPE is None:
            raise TypeError(
                f"{type(self).__name__} is abstract; build a Residence, Commercial or Retail"
            )
        object.__setattr__(self, "price_usd", self._checked_price(self.price_usd))

        require(self.address, "address")
        if not isinstance(self.address, Address):
            raise InvalidFieldError(f"Invalid address: {self.address!r}")

        object.__setattr__(self, "property_type", self._resolve_type(self.property_type))
        check_text(self.property_id, "property id", *self.PROPERTY_ID_LENGTH)

    @classmethod
    def _checked_price(cls, price_usd: float | None) -> float:
        require(price_usd, "price")
        if isinstance(price_usd, bool) or not isinstance(price_usd, (int, float)):
            raise InvalidFieldError(f"Invalid price: {price_usd!r}")
        # also rejects NaN
        if not price_usd >= cls.MIN_PRICE_USD:
            raise InvalidFieldError(f"Invalid price: {price_usd}")
        return float(price_usd)

    @classmethod
    def _resolve_type(cls, property_type: PropertyType | str | None) -> PropertyType:
        if property_type is None:
            return cls.PROPERTY_TYPE
        resolved = PropertyType.parse(property_type)
        if resolved is not cls.PROPERTY_TYPE:
            raise InvalidFieldError(
                f"Invalid property type for {cls.__name__}: {property_type!r}"
            )
        return resolved

    def set_price_usd(self, price_usd: float) -> None:
        """Change the asking price.

        Raises
        ------
        InvalidFieldError
            If ``price_usd`` is negative or not a number.
        """
        object.__setattr__(self, "price_usd", self._checked_price(price_usd))

    def __str__(self) -> str:
        return (
            "\nPROPERTY\n"
            f"priceUsd: {self.price_usd}\n"
            f"address: {self.address}\n"
            f"type: '{self.property_type.value}'\n"
            f"propertyId: '{self.property_id}'\n"
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class Residence(Property):
    """Residential property: house, condo or townhome.

    The text rendering labels the strata line once (``Strata: Yes``); the
    legacy listing output doubled it as ``Strata: Strata: Yes``.
    """

    PROPERTY_TYPE: ClassVar[PropertyType | None] = PropertyType.RESIDENCE
    BEDROOMS_RANGE: ClassVar[tuple[int, int]] = (1, 20)

    number_of_bedrooms: int
    swimming_pool: bool
    strata: bool

    def __post_init__(self) -> None:
        super().__post_init__()
        check_int(self.number_of_bedrooms, "number of bedrooms", *self.BEDROOMS_RANGE)
        check_flag(self.swimming_pool, "swimming pool")
        check_flag(self.strata, "strata")

    def __str__(self) -> str:
        return (
            super().__str__()
            + f"Number of bedrooms: {self.number_of_bedrooms}\n"
            + f"Swimming pool: {_yes_no(self.swimming_pool)}\n"
            + f"Strata: {_yes_no(self.strata)}"
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class Commercial(Property):
    """Commercial property such as a warehouse or office."""

    PROPERTY_TYPE: ClassVar[PropertyType | None] = PropertyType.COMMERCIAL

    loading_dock: bool
    highway_access: bool

    def __post_init__(self) -> None:
        super().__post_init__()
        check_flag(self.loading_dock, "loading dock")
        check_flag(self.highway_access, "highway access")

    def __str__(self) -> str:
        return (
            super().__str__()
            + f"Loading Dock: {_lower_bool(self.loading_dock)}\n"
            + f"Highway Access: {_lower_bool(self.highway_access)}"
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class Retail(Property):
    """Retail storefront."""

    PROPERTY_TYPE: ClassVar[PropertyType | None] = PropertyType.RETAIL
    MIN_SQUARE_FOOTAGE: ClassVar[int] = 0

    square_footage: int
    customer_parking: bool

    def __post_init__(self) -> None:
        super().__post_init__()
        check_int(self.square_footage, "square footage", minimum=self.MIN_SQUARE_FOOTAGE)
        check_flag(self.customer_parking, "customer parking")

    def __str__(self) -> str:
        return (
            super().__str__()
            + f"Square Footage: {self.square_footage}\n"
            + f"Customer Parking: {_lower_bool(self.customer_parking)}"
        )


AnyProperty = Residence | Commercial | Retail
