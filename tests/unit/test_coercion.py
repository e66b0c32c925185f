"""
Unit tests for field coercion rules.

Includes property-based testing with hypothesis for coercers.
"""

from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from calorie_insights.core.coercion import (
    BooleanCoercer,
    CoercionError,
    DateTimeCoercer,
    FloatCoercer,
    IntegerCoercer,
    TextCoercer,
)

# Any value json.loads can produce
json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False) | st.text(),
    lambda children: st.lists(children, max_size=3) | st.dictionaries(st.text(), children, max_size=3),
    max_leaves=5,
)


class TestIntegerCoercer:
    """Tests for IntegerCoercer"""

    def test_number_and_numeric_string_decode_to_same_int(self):
        """Test "42" and 42 both decode to 42"""
        coercer = IntegerCoercer("user_id")
        assert coercer.coerce(42) == 42
        assert coercer.coerce("42") == 42

    def test_signed_and_padded_strings(self):
        """Test leading sign and surrounding whitespace are accepted"""
        coercer = IntegerCoercer("user_id")
        assert coercer.coerce("-7") == -7
        assert coercer.coerce("+15") == 15
        assert coercer.coerce("  8 ") == 8

    def test_float_is_truncated(self):
        """Test JSON floats truncate toward zero"""
        coercer = IntegerCoercer("age")
        assert coercer.coerce(99.9) == 99
        assert coercer.coerce(-3.7) == -3

    @pytest.mark.parametrize("value", ["abc", "", "   ", "1.5", "1_000", "0x1A", "12abc"])
    def test_invalid_strings_raise(self, value):
        """Test non base-10 strings are rejected"""
        with pytest.raises(CoercionError) as exc_info:
            IntegerCoercer("age").coerce(value)

        assert exc_info.value.field_name == "age"
        assert exc_info.value.rule_name == "integer"

    @pytest.mark.parametrize("value", [None, True, False, {}, [], [1]])
    def test_other_types_fall_back_to_zero(self, value):
        """Test null, booleans, objects and arrays fall back to 0"""
        assert IntegerCoercer("age").coerce_or_fallback(value) == 0

    def test_abc_and_null_fall_back_to_zero(self):
        coercer = IntegerCoercer("id")
        assert coercer.coerce_or_fallback("abc") == 0
        assert coercer.coerce_or_fallback(None) == 0

    def test_try_coerce_reports_the_error(self):
        coercer = IntegerCoercer("id")

        assert coercer.try_coerce(" 12 ") == (12, None)

        value, error = coercer.try_coerce("abc")
        assert value == 0
        assert isinstance(error, CoercionError)
        assert error.field_name == "id"


class TestFloatCoercer:
    """Tests for FloatCoercer"""

    def test_numbers_and_numeric_strings(self):
        coercer = FloatCoercer("calories")
        assert coercer.coerce(500) == 500.0
        assert coercer.coerce(12.5) == 12.5
        assert coercer.coerce("99.99") == 99.99
        assert coercer.coerce("1.5e3") == 1500.0
        assert coercer.coerce(" -10.5 ") == -10.5

    @pytest.mark.parametrize("value", ["abc", "", "nan", "inf", "-Infinity"])
    def test_invalid_or_non_finite_strings_raise(self, value):
        with pytest.raises(CoercionError):
            FloatCoercer("calories").coerce(value)

    @pytest.mark.parametrize("value", [None, True, {}, [], "not_a_number"])
    def test_fallback_is_zero(self, value):
        result = FloatCoercer("protein").coerce_or_fallback(value)
        assert result == 0.0
        assert isinstance(result, float)

    def test_result_is_always_float(self):
        assert isinstance(FloatCoercer("weight").coerce(3), float)


class TestBooleanCoercer:
    """Tests for BooleanCoercer"""

    @pytest.mark.parametrize("value", ["YES", "y", "1", "true", " True ", True, 1, 2.5, -1])
    def test_truthy_values(self, value):
        assert BooleanCoercer("favorite").coerce_or_fallback(value) is True

    @pytest.mark.parametrize("value", ["no", "0", "false", "", "maybe", "n", False, 0, 0.0, None, {}, []])
    def test_falsy_values(self, value):
        assert BooleanCoercer("favorite").coerce_or_fallback(value) is False

    def test_unknown_string_is_false_without_error(self):
        """Test strings never raise: anything but a truthy token is False"""
        assert BooleanCoercer("favorite").coerce("maybe") is False

    def test_objects_raise(self):
        with pytest.raises(CoercionError):
            BooleanCoercer("favorite").coerce({"value": True})

    def test_custom_truthy_tokens(self):
        coercer = BooleanCoercer("favorite", {"truthy_tokens": ["Si", "oui"]})
        assert coercer.coerce("si") is True
        assert coercer.coerce("OUI") is True
        assert coercer.coerce("yes") is False

    @given(st.text())
    def test_property_strings_never_raise(self, value):
        """Property test: any string coerces to a bool"""
        assert isinstance(BooleanCoercer("favorite").coerce(value), bool)


class TestDateTimeCoercer:
    """Tests for DateTimeCoercer"""

    def test_calendar_date(self):
        assert DateTimeCoercer("date_consumed").coerce("2022-11-01") == datetime(2022, 11, 1)

    def test_time_of_day_is_retained(self):
        coercer = DateTimeCoercer("date_consumed")
        assert coercer.coerce("2022-11-01T13:15:00") == datetime(2022, 11, 1, 13, 15)
        assert coercer.coerce("2022-11-01 08:30") == datetime(2022, 11, 1, 8, 30)

    def test_utc_suffix(self):
        value = DateTimeCoercer("date_consumed").coerce("2022-11-01T10:00:00Z")
        assert value.utcoffset() == timedelta(0)
        assert value.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["", "yesterday", "2022-13-01", "01/11/2022", 20221101, None, True])
    def test_invalid_dates_raise(self, value):
        with pytest.raises(CoercionError):
            DateTimeCoercer("date_consumed").coerce(value)

    def test_fallback_is_datetime_min(self):
        assert DateTimeCoercer("date_consumed").coerce_or_fallback("garbage") == datetime.min


class TestTextCoercer:
    """Tests for TextCoercer"""

    def test_strings_pass_verbatim(self):
        coercer = TextCoercer("name")
        assert coercer.coerce("  Pasta ") == "  Pasta "
        assert coercer.coerce("") == ""

    def test_numbers_are_rendered(self):
        coercer = TextCoercer("time_consumed", {"optional": True})
        assert coercer.coerce(12) == "12"
        assert coercer.coerce(1.5) == "1.5"

    def test_required_text_falls_back_to_empty_string(self):
        assert TextCoercer("name").coerce_or_fallback(None) == ""
        assert TextCoercer("name").coerce_or_fallback(["a"]) == ""

    def test_optional_text_falls_back_to_none(self):
        coercer = TextCoercer("procedence", {"optional": True})
        assert coercer.coerce_or_fallback(None) is None
        assert coercer.coerce_or_fallback({"x": 1}) is None
        assert coercer.coerce_or_fallback(False) is None


class TestCoercerTotality:
    """Property tests: coerce_or_fallback never raises for JSON values"""

    @given(json_values)
    def test_property_every_coercer_is_total(self, value):
        for coercer in (
            IntegerCoercer("id"),
            FloatCoercer("calories"),
            BooleanCoercer("favorite"),
            DateTimeCoercer("date_consumed"),
            TextCoercer("name"),
        ):
            coercer.coerce_or_fallback(value)

    @given(st.integers(min_value=-10**12, max_value=10**12))
    def test_property_integer_string_round_trip(self, value):
        assert IntegerCoercer("id").coerce(str(value)) == value

    def test_repr_names_field(self):
        assert "favorite" in repr(BooleanCoercer("favorite"))
