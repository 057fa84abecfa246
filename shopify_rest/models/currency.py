from dataclasses import dataclass
from datetime import datetime

from .base import Record, to_timestamp


@dataclass
class Currency(Record):
    """A currency enabled on the shop (``currencies.json``)."""

    currency: str = ""
    enabled: bool = False
    rate_updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Currency":
        return cls(
            currency=data.get("currency") or "",
            enabled=bool(data.get("enabled")),
            rate_updated_at=to_timestamp(data.get("rate_updated_at")),
        )
