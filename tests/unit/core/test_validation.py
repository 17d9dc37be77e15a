"""
Tests for payload validation helpers.

WHY: Every creation path relies on these helpers to tell "missing" apart
from "malformed", and the model validators use the same integer rule.
"""

import pytest

from store_admin.core.exceptions import InvalidPayloadError
from store_admin.core.validation import (
    INT_COLUMN_MAX,
    coerce_int,
    collect_changes,
    fits_int_column,
    is_integer,
    is_present,
    missing_fields,
    positive_int,
    require_fields,
    require_integer,
)


class TestPresence:
    """Tests for required-field checks."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_values(self, value):
        assert not is_present(value)

    @pytest.mark.parametrize("value", [0, "0", False, [], "x"])
    def test_present_values(self, value):
        """Zero and other falsy non-blank values count as present."""
        assert is_present(value)

    def test_missing_fields_keeps_order(self):
        payload = {"name": "Nets", "phone": ""}
        assert missing_fields(payload, ["name", "address", "phone"]) == ["address", "phone"]

    def test_require_fields_raises_with_description(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            require_fields({"name": "x"}, ["name", "price"], "name, price and overs are required.")

        assert exc_info.value.message == "name, price and overs are required."
        assert exc_info.value.context["missing"] == ["price"]

    def test_require_fields_passes(self):
        require_fields({"name": "x"}, ["name"], "unused")


class TestCoerceInt:
    """Tests for the integer-format rule."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, 5),
            (-3, -3),
            (6.0, 6),
            ("500", 500),
            (" 42 ", 42),
            ("-7", -7),
            ("+7", 7),
            ("500.0", 500),
            ("500.", 500),
            (" 6.00 ", 6),
        ],
    )
    def test_accepted(self, value, expected):
        assert coerce_int(value) == expected

    @pytest.mark.parametrize(
        "value",
        [True, False, 6.5, "6.5", "6.05", "1e3", "NaN", ".5", "", "abc", "12abc", None, [1], {}],
    )
    def test_rejected(self, value):
        assert coerce_int(value) is None
        assert not is_integer(value)


class TestRequireInteger:
    def test_missing(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            require_integer({}, "price")
        assert exc_info.value.message == "price is required."

    def test_malformed(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            require_integer({"overs": "six"}, "overs")
        assert exc_info.value.message == "overs must be an integer."

    def test_numeric_string(self):
        assert require_integer({"price": "450"}, "price") == 450


class TestPositiveInt:
    def test_positive(self):
        assert positive_int("price", "10") == 10

    @pytest.mark.parametrize("value", [0, -1, "-5"])
    def test_not_positive(self, value):
        with pytest.raises(InvalidPayloadError) as exc_info:
            positive_int("price", value)
        assert exc_info.value.message == "price must be a positive integer."

    def test_not_integer(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            positive_int("overs", "a lot")
        assert exc_info.value.message == "overs must be an integer."

    def test_column_maximum_accepted(self):
        assert positive_int("price", str(INT_COLUMN_MAX)) == INT_COLUMN_MAX

    @pytest.mark.parametrize("value", [INT_COLUMN_MAX + 1, str(10**20)])
    def test_beyond_column_range(self, value):
        with pytest.raises(InvalidPayloadError) as exc_info:
            positive_int("price", value)
        assert exc_info.value.message == "price must be at most 2147483647."


class TestFitsIntColumn:
    @pytest.mark.parametrize("value", [0, 1, -1, INT_COLUMN_MAX, -(2**31)])
    def test_in_range(self, value):
        assert fits_int_column(value)

    @pytest.mark.parametrize("value", [INT_COLUMN_MAX + 1, -(2**31) - 1, 10**20])
    def test_out_of_range(self, value):
        assert not fits_int_column(value)


class TestCollectChanges:
    """Tests for partial update field selection."""

    def test_absent_keys_untouched(self):
        assert collect_changes({"name": "New"}, ("name", "phone")) == {"name": "New"}

    def test_null_ignored_unless_nullable(self):
        data = {"name": None, "title": None}
        assert collect_changes(data, ("name", "title"), nullable=("title",)) == {"title": None}

    def test_unknown_fields_ignored(self):
        assert collect_changes({"password": "x"}, ("name",)) == {}
