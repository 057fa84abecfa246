from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .base import Record, to_timestamp


@dataclass
class Metafield(Record):
    id: int | None = None
    namespace: str | None = None
    key: str | None = None
    value: Any = None
    type: str | None = None
    description: str | None = None
    owner_id: int | None = None
    owner_resource: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    admin_graphql_api_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Metafield":
        return cls(
            id=data.get("id"),
            namespace=data.get("namespace"),
            key=data.get("key"),
            value=data.get("value"),
            type=data.get("type") or data.get("value_type"),
            description=data.get("description"),
            owner_id=data.get("owner_id"),
            owner_resource=data.get("owner_resource"),
            created_at=to_timestamp(data.get("created_at")),
            updated_at=to_timestamp(data.get("updated_at")),
            admin_graphql_api_id=data.get("admin_graphql_api_id"),
        )


@dataclass
class Fulfillment(Record):
    id: int | None = None
    order_id: int | None = None
    location_id: int | None = None
    name: str | None = None
    status: str | None = None
    service: str | None = None
    shipment_status: str | None = None
    tracking_company: str | None = None
    tracking_number: str | None = None
    tracking_numbers: list[str] = field(default_factory=list)
    tracking_url: str | None = None
    tracking_urls: list[str] = field(default_factory=list)
    notify_customer: bool | None = None
    receipt: dict | None = None
    line_items: list = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Fulfillment":
        # imported here: order.py imports this module for Order.metafields
        from .order import LineItem

        return cls(
            id=data.get("id"),
            order_id=data.get("order_id"),
            location_id=data.get("location_id"),
            name=data.get("name"),
            status=data.get("status"),
            service=data.get("service"),
            shipment_status=data.get("shipment_status"),
            tracking_company=data.get("tracking_company"),
            tracking_number=data.get("tracking_number"),
            tracking_numbers=list(data.get("tracking_numbers") or []),
            tracking_url=data.get("tracking_url"),
            tracking_urls=list(data.get("tracking_urls") or []),
            notify_customer=data.get("notify_customer"),
            receipt=data.get("receipt"),
            line_items=[LineItem.from_dict(li) for li in (data.get("line_items") or [])],
            created_at=to_timestamp(data.get("created_at")),
            updated_at=to_timestamp(data.get("updated_at")),
        )
