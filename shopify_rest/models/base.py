from dataclasses import fields
from datetime import datetime
from decimal import Decimal, InvalidOperation

from ..decoding import parse_flexible_timestamp
from ..errors import DecodeError


def to_decimal(value) -> Decimal | None:
    """Money comes back as ``"10.00"`` on most endpoints and as a bare number on some."""
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise DecodeError(f"invalid decimal value {value!r}") from e


def to_timestamp(value) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return parse_flexible_timestamp(value)


def record(cls, data):
    return cls.from_dict(data) if data is not None else None


def records(cls, items) -> list:
    return [cls.from_dict(item) for item in (items or [])]


def _serialize(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


class Record:
    """Mixin for dataclass records: JSON-ready ``to_dict`` that drops unset fields.

    A field's wire name defaults to the attribute name and can be overridden
    with ``field(metadata={"json": "..."})``.
    """

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or (isinstance(value, list) and not value):
                continue
            out[f.metadata.get("json", f.name)] = _serialize(value)
        return out
