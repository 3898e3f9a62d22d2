"""Tests for utility helpers."""

import pytest

from faker_dispatch.utils.helpers import is_array_shaped, to_lower_camel, to_text


class TestToLowerCamel:
    """Tests for display label to key conversion."""

    @pytest.mark.parametrize("label,expected", [
        ("First Name", "firstName"),
        ("Credit Card CVV", "creditCardCvv"),
        ("IPv4 Address", "ipv4Address"),
        ("gRPC Error", "gRpcError"),
        ("Flip A Coin", "flipACoin"),
        ("HTTP Status Code Simple", "httpStatusCodeSimple"),
        ("Hex Uint128", "hexUint128"),
        ("DigitN", "digitN"),
        ("UUID", "uuid"),
        ("Boolean", "boolean"),
        ("snake_case-and.dots", "snakeCaseAndDots"),
    ])
    def test_labels(self, label, expected):
        assert to_lower_camel(label) == expected

    def test_digit_capitalizes_next_letter(self):
        assert to_lower_camel("ipv4address") == "ipv4Address"

    def test_strips_surrounding_space(self):
        assert to_lower_camel("  Last Name ") == "lastName"

    def test_empty(self):
        assert to_lower_camel("") == ""


class TestToText:
    """Tests for script-style stringification."""

    def test_booleans(self):
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_integral_float_drops_fraction(self):
        assert to_text(5.0) == "5"
        assert to_text(-3.0) == "-3"

    def test_fractional_float(self):
        assert to_text(2.5) == "2.5"

    def test_other_values(self):
        assert to_text(42) == "42"
        assert to_text("visa") == "visa"


class TestIsArrayShaped:
    def test_lists_and_tuples(self):
        assert is_array_shaped([1, 2])
        assert is_array_shaped(())

    def test_scalars(self):
        assert not is_array_shaped("abc")
        assert not is_array_shaped({"a": 1})
        assert not is_array_shaped(3)
