"""
Unit tests for the tolerant field decoders and the timestamp normalizer.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from shopify_rest.decoding import (
    NoteAttribute,
    decode_properties,
    decode_properties_value,
    decode_variant_scalar,
    parse_flexible_timestamp,
)
from shopify_rest.errors import DecodeError, TimestampParseError


@pytest.mark.unit
class TestDecodeProperties:
    """Tests for decode_properties."""

    def test_array_is_kept_as_is(self):
        """Test an array of {name, value} pairs decodes in order."""
        raw = [{"name": "a", "value": "1"}, {"name": "b", "value": 2}]

        result = decode_properties(raw)

        assert result == [NoteAttribute("a", "1"), NoteAttribute("b", 2)]

    def test_array_from_json_text(self):
        """Test raw JSON text starting with '[' takes the array branch."""
        result = decode_properties('  [{"name": "Engraving", "value": "Hi"}]')

        assert result == [NoteAttribute("Engraving", "Hi")]

    def test_array_from_bytes(self):
        """Test raw bytes are accepted like text."""
        result = decode_properties(b'[{"name": "x", "value": null}]')

        assert result == [NoteAttribute("x", None)]

    def test_empty_array(self):
        assert decode_properties([]) == []
        assert decode_properties("[]") == []

    def test_single_object_is_wrapped(self):
        """Test a lone object becomes a one-element list."""
        result = decode_properties({"name": "Gift wrap", "value": "yes"})

        assert result == [NoteAttribute("Gift wrap", "yes")]

    def test_single_object_from_json_text(self):
        result = decode_properties('{"name": "Gift wrap", "value": "yes"}')

        assert result == [NoteAttribute("Gift wrap", "yes")]

    def test_object_with_value_but_no_name_is_kept(self):
        """Test only name AND value missing counts as empty."""
        result = decode_properties({"value": "orphan"})

        assert result == [NoteAttribute("", "orphan")]

    @pytest.mark.parametrize("raw", [{}, "{}", b"{}", "null"])
    def test_empty_object_marker(self, raw):
        """Test the historical '{}' encoding collapses to an empty list."""
        assert decode_properties(raw) == []

    @pytest.mark.parametrize("raw", [None, "", "   ", b""])
    def test_absent_or_empty_content(self, raw):
        """Test absent or empty content is an empty list, never None."""
        assert decode_properties(raw) == []

    @pytest.mark.parametrize("raw", ["[{\"name\": ", "{not json}", "[1, 2"])
    def test_malformed_json_raises(self, raw):
        with pytest.raises(DecodeError):
            decode_properties(raw)

    def test_array_with_non_object_element_raises(self):
        with pytest.raises(DecodeError):
            decode_properties([{"name": "ok", "value": 1}, "nope"])

    @pytest.mark.parametrize("raw", ['"just a string"', "42", "true"])
    def test_non_object_scalar_raises(self, raw):
        with pytest.raises(DecodeError):
            decode_properties(raw)

    def test_non_string_name_raises(self):
        with pytest.raises(DecodeError):
            decode_properties({"name": 5, "value": "x"})

    def test_decode_error_is_value_error(self):
        """Test callers catching ValueError also see DecodeError."""
        with pytest.raises(ValueError):
            decode_properties("{oops")

    def test_invalid_utf8_bytes_raise_decode_error(self):
        with pytest.raises(DecodeError):
            decode_properties(b"[\xff\xfe]")


@pytest.mark.unit
class TestDecodePropertiesValue:
    """Tests for decode_properties_value on already-parsed JSON."""

    def test_list_and_object(self):
        assert decode_properties_value([{"name": "a", "value": 1}]) == [NoteAttribute("a", 1)]
        assert decode_properties_value({"name": "a", "value": 1}) == [NoteAttribute("a", 1)]

    @pytest.mark.parametrize("value", [None, {}])
    def test_empty(self, value):
        assert decode_properties_value(value) == []

    @pytest.mark.parametrize("value", ["{}", "[{\"name\": \"a\", \"value\": 1}]", "", 42, True])
    def test_strings_are_not_reparsed(self, value):
        """Test a JSON string on the wire is a non-object, even if it looks like JSON."""
        with pytest.raises(DecodeError):
            decode_properties_value(value)


@pytest.mark.unit
class TestDecodeVariantScalar:
    """Tests for decode_variant_scalar."""

    def test_null_is_empty_string(self):
        assert decode_variant_scalar(None) == ""

    def test_integer(self):
        assert decode_variant_scalar(12345) == "12345"

    def test_integral_float_has_no_fraction(self):
        assert decode_variant_scalar(12345.0) == "12345"

    def test_fractional_float(self):
        assert decode_variant_scalar(1.5) == "1.5"

    def test_decimal(self):
        assert decode_variant_scalar(Decimal("12345")) == "12345"

    def test_large_integer_has_no_grouping(self):
        assert decode_variant_scalar(1234567890123) == "1234567890123"

    def test_string_passes_through(self):
        assert decode_variant_scalar("third-party-fs") == "third-party-fs"

    @pytest.mark.parametrize("raw", [True, False, {"id": 1}, [1, 2]])
    def test_other_shapes_raise(self, raw):
        with pytest.raises(DecodeError):
            decode_variant_scalar(raw)


@pytest.mark.unit
class TestParseFlexibleTimestamp:
    """Tests for parse_flexible_timestamp."""

    def test_none(self):
        assert parse_flexible_timestamp(None) is None

    def test_date_only_is_naive_midnight(self):
        result = parse_flexible_timestamp("2013-06-27")

        assert result == datetime(2013, 6, 27, 0, 0, 0)
        assert result.tzinfo is None

    def test_rfc3339_keeps_offset(self):
        result = parse_flexible_timestamp("2013-06-27T08:48:27-04:00")

        assert result == datetime(2013, 6, 27, 8, 48, 27, tzinfo=timezone(timedelta(hours=-4)))
        assert result.utcoffset() == timedelta(hours=-4)

    def test_rfc3339_zulu(self):
        result = parse_flexible_timestamp("2013-06-27T12:48:27Z")

        assert result == datetime(2013, 6, 27, 12, 48, 27, tzinfo=timezone.utc)

    def test_rfc3339_fractional_seconds(self):
        """Test nanosecond precision is truncated to microseconds."""
        result = parse_flexible_timestamp("2013-06-27T08:48:27.123456789+02:00")

        assert result.microsecond == 123456
        assert result.utcoffset() == timedelta(hours=2)

    def test_rfc3339_short_fraction(self):
        result = parse_flexible_timestamp("2013-06-27T08:48:27.5Z")

        assert result.microsecond == 500000

    @pytest.mark.parametrize("raw", [
        "not-a-date",
        "2013-13-45",
        "2013-06-27 08:48:27",
        "2013-06-27T08:48:27",
        "yesterday at noon",
        "",
    ])
    def test_unrecognised_raises_with_original_value(self, raw):
        with pytest.raises(TimestampParseError) as exc:
            parse_flexible_timestamp(raw)

        assert exc.value.value == raw

    def test_invalid_calendar_date_in_rfc3339(self):
        with pytest.raises(TimestampParseError):
            parse_flexible_timestamp("2013-02-30T08:48:27Z")
