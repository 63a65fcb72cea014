"""Tests for domain models."""

import dataclasses

import pytest

from property_agency.exceptions import InvalidFieldError, MissingFieldError, ValidationError
from property_agency.models import (
    Address,
    Commercial,
    Property,
    PropertyType,
    Residence,
    Retail,
)

ADDRESS_FIELDS = {
    "unit_number": "12",
    "street_number": 1500,
    "street_name": "Main Street",
    "postal_code": "V6B1A1",
    "city": "Vancouver",
}


def _address(**overrides) -> Address:
    return Address(**{**ADDRESS_FIELDS, **overrides})


class TestAddress:
    """Tests for Address model."""

    def test_address_creation(self) -> None:
        address = _address()

        assert address.unit_number == "12"
        assert address.street_number == 1500
        assert address.street_name == "Main Street"
        assert address.postal_code == "V6B1A1"
        assert address.city == "Vancouver"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"unit_number": "1"},
            {"unit_number": "1234"},
            {"street_number": 0},
            {"street_number": 999999},
            {"street_name": "x" * 20},
            {"postal_code": "12345"},
            {"city": "c" * 30},
        ],
    )
    def test_boundary_values_accepted(self, overrides: dict) -> None:
        address = _address(**overrides)

        for name, value in overrides.items():
            assert getattr(address, name) == value

    @pytest.mark.parametrize(
        "overrides",
        [
            {"unit_number": ""},
            {"unit_number": "12345"},
            {"street_number": -1},
            {"street_number": 1000000},
            {"street_number": "100"},
            {"street_name": "   "},
            {"street_name": "x" * 21},
            {"postal_code": "1234"},
            {"postal_code": "1234567"},
            {"city": ""},
            {"city": "c" * 31},
        ],
    )
    def test_out_of_range_rejected(self, overrides: dict) -> None:
        with pytest.raises(InvalidFieldError):
            _address(**overrides)

    @pytest.mark.parametrize("field_name", list(ADDRESS_FIELDS))
    def test_missing_field_rejected(self, field_name: str) -> None:
        with pytest.raises(MissingFieldError):
            _address(**{field_name: None})

    def test_value_equality(self) -> None:
        assert _address() == _address()
        assert _address() != _address(unit_number="99")

    def test_immutable(self) -> None:
        address = _address()

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.city = "Burnaby"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(_address()) == (
            "Address [unitNumber: 12, streetNumber: 1500, streetName: Main Street, "
            "postalCode: V6B1A1, city: Vancouver]"
        )


class TestPropertyType:
    """Tests for PropertyType parsing."""

    @pytest.mark.parametrize("raw", ["residence", "RESIDENCE", "Residence", " residence "])
    def test_parse_case_insensitive(self, raw: str) -> None:
        assert PropertyType.parse(raw) is PropertyType.RESIDENCE

    def test_parse_member(self) -> None:
        assert PropertyType.parse(PropertyType.RETAIL) is PropertyType.RETAIL

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidFieldError):
            PropertyType.parse("industrial")

    def test_parse_none(self) -> None:
        with pytest.raises(MissingFieldError):
            PropertyType.parse(None)


class TestProperty:
    """Tests for the base Property model."""

    def test_property_creation(self, make_commercial, sample_address: Address) -> None:
        prop = make_commercial(price_usd=100, property_id="P1", property_type="Commercial")

        assert prop.price_usd == 100.0
        assert isinstance(prop.price_usd, float)
        assert prop.address is sample_address
        assert prop.property_id == "P1"
        assert prop.property_type is PropertyType.COMMERCIAL

    @pytest.mark.parametrize("property_type", [None, "residence", "Commercial"])
    def test_base_is_abstract(self, sample_address: Address, property_type) -> None:
        with pytest.raises(TypeError, match="abstract"):
            Property(
                price_usd=100,
                address=sample_address,
                property_id="P1",
                property_type=property_type,
            )

    def test_unrecognized_type(self, make_retail) -> None:
        with pytest.raises(InvalidFieldError):
            make_retail(property_type="farm")

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            ("make_residence", PropertyType.RESIDENCE),
            ("make_commercial", PropertyType.COMMERCIAL),
            ("make_retail", PropertyType.RETAIL),
        ],
    )
    def test_tag_matches_class(self, request, factory: str, expected: PropertyType) -> None:
        prop = request.getfixturevalue(factory)()

        assert prop.property_type is expected
        assert prop.property_type is type(prop).PROPERTY_TYPE

    def test_negative_price(self, make_residence) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(price_usd=-0.01)

    def test_zero_price(self, make_residence) -> None:
        assert make_residence(price_usd=0).price_usd == 0.0

    def test_nan_price(self, make_residence) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(price_usd=float("nan"))

    def test_missing_address(self, make_residence) -> None:
        with pytest.raises(MissingFieldError):
            make_residence(address=None)

    @pytest.mark.parametrize("property_id", ["", "1234567"])
    def test_property_id_length(self, make_residence, property_id: str) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(property_id=property_id)

    def test_missing_property_id(self, make_residence) -> None:
        with pytest.raises(MissingFieldError):
            make_residence(property_id=None)

    def test_set_price_usd(self, make_residence) -> None:
        residence = make_residence(price_usd=100)

        residence.set_price_usd(250.5)

        assert residence.price_usd == 250.5

    def test_set_price_usd_negative(self, make_residence) -> None:
        residence = make_residence(price_usd=100)

        with pytest.raises(InvalidFieldError):
            residence.set_price_usd(-1)

        assert residence.price_usd == 100.0

    def test_other_fields_immutable(self, make_residence) -> None:
        residence = make_residence()

        with pytest.raises(dataclasses.FrozenInstanceError):
            residence.price_usd = 1.0  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            residence.number_of_bedrooms = 4  # type: ignore[misc]

    def test_identity_equality(self, make_residence) -> None:
        assert make_residence() != make_residence()

    def test_validation_errors_are_value_errors(self, make_residence) -> None:
        with pytest.raises(ValueError):
            make_residence(price_usd=-5)
        with pytest.raises(ValidationError):
            make_residence(price_usd=-5)


class TestResidence:
    """Tests for Residence model."""

    def test_residence_creation(self, make_residence) -> None:
        residence = make_residence(number_of_bedrooms=4, swimming_pool=True, strata=True)

        assert residence.number_of_bedrooms == 4
        assert residence.swimming_pool is True
        assert residence.strata is True
        assert residence.property_type is PropertyType.RESIDENCE

    @pytest.mark.parametrize("bedrooms", [1, 20])
    def test_bedroom_bounds_accepted(self, make_residence, bedrooms: int) -> None:
        assert make_residence(number_of_bedrooms=bedrooms).number_of_bedrooms == bedrooms

    @pytest.mark.parametrize("bedrooms", [0, 21, True, 2.5])
    def test_bedroom_bounds_rejected(self, make_residence, bedrooms) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(number_of_bedrooms=bedrooms)

    def test_matching_type_tag_accepted(self, make_residence) -> None:
        assert make_residence(property_type="RESIDENCE").property_type is PropertyType.RESIDENCE

    def test_mismatched_type_tag_rejected(self, make_residence) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(property_type="retail")

    def test_flag_must_be_bool(self, make_residence) -> None:
        with pytest.raises(InvalidFieldError):
            make_residence(swimming_pool="yes")

    def test_str(self, make_residence) -> None:
        text = str(make_residence(price_usd=750000, swimming_pool=True))

        assert text.startswith("\nPROPERTY\npriceUsd: 750000.0\naddress: Address [")
        assert "type: 'residence'\npropertyId: 'R1'\n" in text
        assert text.endswith("Number of bedrooms: 3\nSwimming pool: Yes\nStrata: No")

    def test_str_strata_labelled_once(self, make_residence) -> None:
        text = str(make_residence(strata=True))

        assert text.endswith("\nStrata: Yes")
        assert "Strata: Strata" not in text


class TestCommercial:
    """Tests for Commercial model."""

    def test_commercial_creation(self, make_commercial) -> None:
        commercial = make_commercial(loading_dock=True)

        assert commercial.loading_dock is True
        assert commercial.highway_access is False
        assert commercial.property_type is PropertyType.COMMERCIAL

    def test_mismatched_type_tag_rejected(self, make_commercial) -> None:
        with pytest.raises(InvalidFieldError):
            make_commercial(property_type="residence")

    def test_str(self, make_commercial) -> None:
        text = str(make_commercial(loading_dock=True))

        assert text.endswith("propertyId: 'C1'\nLoading Dock: true\nHighway Access: false")


class TestRetail:
    """Tests for Retail model."""

    def test_retail_creation(self, make_retail) -> None:
        retail = make_retail(square_footage=0, customer_parking=True)

        assert retail.square_footage == 0
        assert retail.customer_parking is True
        assert retail.property_type is PropertyType.RETAIL

    def test_negative_square_footage(self, make_retail) -> None:
        with pytest.raises(InvalidFieldError):
            make_retail(square_footage=-1)

    def test_str(self, make_retail) -> None:
        text = str(make_retail(customer_parking=True))

        assert text.endswith("Square Footage: 1200\nCustomer Parking: true")
