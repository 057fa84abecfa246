"""Decoding helpers for fields the Shopify API has serialised in more than one way.

Older orders carry ``line_items[].properties`` as ``{}`` instead of ``[]``,
``shipping_lines[].requested_fulfillment_service_id`` comes back as a string,
a number or ``null``, and billing endpoints mix date-only and full RFC 3339
timestamps. The functions here collapse each of those into a single shape.
"""
import json
import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from .errors import DecodeError, TimestampParseError

DATE_ONLY_FORMAT = "%Y-%m-%d"

_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass
class NoteAttribute:
    """A single ``{name, value}`` pair (line item property, order note attribute)."""

    name: str = ""
    value: Any = None

    def is_empty(self) -> bool:
        return self.name == "" and self.value is None

    def to_dict(self) -> dict:
        out = {}
        if self.name:
            out["name"] = self.name
        if self.value is not None:
            out["value"] = self.value
        return out


def _note_attribute(obj: Any) -> NoteAttribute:
    if obj is None:
        return NoteAttribute()
    if not isinstance(obj, dict):
        raise DecodeError(f"expected a {{name, value}} object, got {type(obj).__name__}")
    name = obj.get("name")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        raise DecodeError(f"property name must be a string, got {type(name).__name__}")
    return NoteAttribute(name=name, value=obj.get("value"))


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"malformed JSON: {e}") from e


def decode_properties_value(value: Any) -> list[NoteAttribute]:
    """Decode a properties field already parsed by ``json.loads``.

    Arrays decode element by element, a single object becomes a one-element
    list, and ``None`` or ``{}`` become ``[]``. Strings are not re-parsed: a
    JSON string on the wire is a non-object and raises :class:`DecodeError`.
    """
    if isinstance(value, list):
        return [_note_attribute(item) for item in value]

    prop = _note_attribute(value)
    if prop.is_empty():
        return []
    return [prop]


def decode_properties(raw: Any) -> list[NoteAttribute]:
    """Decode raw JSON text (``str``/``bytes``) of a properties field.

    The branch is picked from the first significant character. Values that
    are not text are handed to :func:`decode_properties_value` unchanged.
    """
    if raw is None:
        return []

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"properties are not valid UTF-8: {e}") from e

    if not isinstance(raw, str):
        return decode_properties_value(raw)

    text = raw.strip()
    if not text:
        return []
    is_array = text[0] == "["
    value = _loads(text)
    if is_array and not isinstance(value, list):
        raise DecodeError("malformed JSON array")
    return decode_properties_value(value)


def decode_variant_scalar(raw: Any) -> str:
    """Collapse a null/number/string JSON value into a string.

    ``None`` becomes ``""``; numbers are rendered in plain decimal form.
    Booleans, objects and arrays are rejected.
    """
    if raw is None:
        return ""
    # bool is a subclass of int
    if isinstance(raw, bool):
        raise DecodeError("expected a string, number or null, got a boolean")
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        if raw.is_integer():
            return str(int(raw))
        return repr(raw)
    if isinstance(raw, Decimal):
        return format(raw, "f")
    raise DecodeError(f"expected a string, number or null, got {type(raw).__name__}")


def parse_flexible_timestamp(raw: str | None) -> datetime | None:
    """Parse ``YYYY-MM-DD`` or RFC 3339 text; the format is picked by length.

    Date-only values give a naive midnight, RFC 3339 values keep their offset.
    """
    if raw is None:
        return None

    if len(raw) == 10:
        try:
            return datetime.strptime(raw, DATE_ONLY_FORMAT)
        except ValueError as e:
            raise TimestampParseError(raw) from e

    m = _RFC3339.match(raw)
    if not m:
        raise TimestampParseError(raw)
    date_part, time_part, fraction, zone = m.groups()
    iso = f"{date_part}T{time_part}"
    if fraction:
        iso += "." + fraction[:6].ljust(6, "0")
    iso += "+00:00" if zone in ("Z", "z") else zone
    try:
        return datetime.fromisoformat(iso)
    except ValueError as e:
        raise TimestampParseError(raw) from e
