"""BigCommerce catalog records (product modifiers and their option values)."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .base import Record, record, records, to_decimal


@dataclass
class BcPriceAdjuster(Record):
    adjuster: str | None = None
    adjuster_value: Decimal | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "BcPriceAdjuster":
        return cls(adjuster=data.get("adjuster"), adjuster_value=to_decimal(data.get("adjuster_value")))


@dataclass
class BcPurchasingDisabled(Record):
    status: bool = False
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "BcPurchasingDisabled":
        return cls(status=bool(data.get("status")), message=data.get("message") or "")


@dataclass
class BcAdjusters(Record):
    price: BcPriceAdjuster | None = None
    weight: Any = None
    image_url: str | None = None
    purchasing_disabled: BcPurchasingDisabled | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "BcAdjusters":
        return cls(
            price=record(BcPriceAdjuster, data.get("price")),
            weight=data.get("weight"),
            image_url=data.get("image_url"),
            purchasing_disabled=record(BcPurchasingDisabled, data.get("purchasing_disabled")),
        )


@dataclass
class BcModifierOptionValue(Record):
    id: int | None = None
    option_id: int | None = None
    label: str | None = None
    sort_order: int | None = None
    value_data: Any = None
    is_default: bool = False
    adjusters: BcAdjusters | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "BcModifierOptionValue":
        return cls(
            id=data.get("id"),
            option_id=data.get("option_id"),
            label=data.get("label"),
            sort_order=data.get("sort_order"),
            value_data=data.get("value_data"),
            is_default=bool(data.get("is_default")),
            adjusters=record(BcAdjusters, data.get("adjusters")),
        )


@dataclass
class BcModifier(Record):
    id: int | None = None
    product_id: int | None = None
    name: str | None = None
    display_name: str | None = None
    type: str | None = None
    required: bool = False
    sort_order: int | None = None
    config: dict = field(default_factory=dict)
    option_values: list[BcModifierOptionValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "BcModifier":
        return cls(
            id=data.get("id"),
            product_id=data.get("product_id"),
            name=data.get("name"),
            display_name=data.get("display_name"),
            type=data.get("type"),
            required=bool(data.get("required")),
            sort_order=data.get("sort_order"),
            config=dict(data.get("config") or {}),
            option_values=records(BcModifierOptionValue, data.get("option_values")),
        )


@dataclass
class BcOptionValue(Record):
    id: int | None = None
    label: str | None = None
    option_id: int | None = None
    option_display_name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "BcOptionValue":
        return cls(**{f: data.get(f) for f in cls.__dataclass_fields__})
