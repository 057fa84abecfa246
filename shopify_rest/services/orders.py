from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..models.metafield import Fulfillment, Metafield
from ..models.order import Order, OrderCancelOptions, order_payload
from ..pagination import ListOptions, Pagination, extract_pagination, format_param, options_to_params

ORDERS_BASE_PATH = "orders"


@dataclass
class OrderListOptions:
    """Filters for ``orders.json``; paging and common filters live in ``list_options``."""

    list_options: ListOptions = field(default_factory=ListOptions)
    status: str = ""
    financial_status: str = ""
    fulfillment_status: str = ""
    processed_at_min: datetime | None = None
    processed_at_max: datetime | None = None

    def to_params(self) -> dict:
        params = self.list_options.to_params()
        for name in (
            "status", "financial_status", "fulfillment_status",
            "processed_at_min", "processed_at_max",
        ):
            value = getattr(self, name)
            if value:
                params[name] = format_param(value)
        return params


@dataclass
class OrderCountOptions:
    since_id: int = 0
    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None
    status: str = ""
    financial_status: str = ""
    fulfillment_status: str = ""

    def to_params(self) -> dict:
        return {
            name: format_param(value)
            for name, value in vars(self).items()
            if value
        }


class _OrderSubresource:
    """Shared CRUD for ``orders/<order_id>/<resource>`` collections."""

    resource = ""
    singular = ""
    record = None

    def __init__(self, client, order_id: int):
        self.client = client
        self.order_id = order_id

    def _path(self, suffix: str = "") -> str:
        base = f"{ORDERS_BASE_PATH}/{self.order_id}/{self.resource}"
        return f"{base}{suffix}.json"

    def list(self, options=None) -> list:
        data = self.client.get(self._path(), options)
        return [self.record.from_dict(item) for item in data.get(self.resource) or []]

    def count(self, options=None) -> int:
        return self.client.count(self._path("/count"), options)

    def get(self, item_id: int, options=None):
        data = self.client.get(self._path(f"/{item_id}"), options)
        return self._one(data)

    def create(self, item):
        data = self.client.post(self._path(), {self.singular: item.to_dict()})
        return self._one(data)

    def update(self, item):
        data = self.client.put(self._path(f"/{item.id}"), {self.singular: item.to_dict()})
        return self._one(data)

    def delete(self, item_id: int) -> None:
        self.client.delete(self._path(f"/{item_id}"))

    def _one(self, data: dict):
        payload = data.get(self.singular)
        return self.record.from_dict(payload) if payload is not None else None


class _MetafieldService(_OrderSubresource):
    resource = "metafields"
    singular = "metafield"
    record = Metafield


class _FulfillmentService(_OrderSubresource):
    resource = "fulfillments"
    singular = "fulfillment"
    record = Fulfillment

    def _action(self, fulfillment_id: int, action: str):
        return self._one(self.client.post(self._path(f"/{fulfillment_id}/{action}")))

    def complete(self, fulfillment_id: int):
        return self._action(fulfillment_id, "complete")

    def transition(self, fulfillment_id: int):
        return self._action(fulfillment_id, "open")

    def cancel(self, fulfillment_id: int):
        return self._action(fulfillment_id, "cancel")


class OrderService:
    """``orders`` endpoints plus the order-scoped metafields and fulfillments."""

    def __init__(self, client):
        self.client = client

    def _one(self, data: dict) -> Order | None:
        payload = data.get("order")
        return Order.from_dict(payload) if payload is not None else None

    def list(self, options=None) -> list[Order]:
        orders, _ = self.list_with_pagination(options)
        return orders

    def list_with_pagination(self, options=None) -> tuple[list[Order], Pagination]:
        data, headers = self.client.get_with_headers(f"{ORDERS_BASE_PATH}.json", options)
        pagination = extract_pagination(headers.get("Link"))
        orders = [Order.from_dict(o) for o in data.get("orders") or []]
        return orders, pagination

    def list_all(self, options=None) -> list[Order]:
        """Follow ``rel="next"`` links until the last page.

        Shopify only accepts ``limit`` and ``fields`` next to ``page_info``, so
        later pages drop the other filters.
        """
        fields = options_to_params(options).get("fields") or ""
        orders, pagination = self.list_with_pagination(options)
        while pagination.next_page_options is not None:
            page = pagination.next_page_options
            page.fields = fields
            page_orders, pagination = self.list_with_pagination(page)
            orders.extend(page_orders)
        return orders

    def count(self, options=None) -> int:
        return self.client.count(f"{ORDERS_BASE_PATH}/count.json", options)

    def get(self, order_id: int, options=None) -> Order | None:
        return self._one(self.client.get(f"{ORDERS_BASE_PATH}/{order_id}.json", options))

    def create(self, order: Order) -> Order | None:
        return self._one(self.client.post(f"{ORDERS_BASE_PATH}.json", order_payload(order)))

    def update(self, order: Order) -> Order | None:
        return self._one(self.client.put(f"{ORDERS_BASE_PATH}/{order.id}.json", order_payload(order)))

    def cancel(self, order_id: int, options: OrderCancelOptions | dict | None = None) -> Order | None:
        body = options.to_dict() if isinstance(options, OrderCancelOptions) else options
        return self._one(self.client.post(f"{ORDERS_BASE_PATH}/{order_id}/cancel.json", body))

    def close(self, order_id: int) -> Order | None:
        return self._one(self.client.post(f"{ORDERS_BASE_PATH}/{order_id}/close.json"))

    def open(self, order_id: int) -> Order | None:
        return self._one(self.client.post(f"{ORDERS_BASE_PATH}/{order_id}/open.json"))

    # Metafields

    def list_metafields(self, order_id: int, options=None) -> list[Metafield]:
        return _MetafieldService(self.client, order_id).list(options)

    def count_metafields(self, order_id: int, options=None) -> int:
        return _MetafieldService(self.client, order_id).count(options)

    def get_metafield(self, order_id: int, metafield_id: int, options=None) -> Metafield | None:
        return _MetafieldService(self.client, order_id).get(metafield_id, options)

    def create_metafield(self, order_id: int, metafield: Metafield) -> Metafield | None:
        return _MetafieldService(self.client, order_id).create(metafield)

    def update_metafield(self, order_id: int, metafield: Metafield) -> Metafield | None:
        return _MetafieldService(self.client, order_id).update(metafield)

    def delete_metafield(self, order_id: int, metafield_id: int) -> None:
        _MetafieldService(self.client, order_id).delete(metafield_id)

    # Fulfillments

    def list_fulfillments(self, order_id: int, options=None) -> list[Fulfillment]:
        return _FulfillmentService(self.client, order_id).list(options)

    def count_fulfillments(self, order_id: int, options=None) -> int:
        return _FulfillmentService(self.client, order_id).count(options)

    def get_fulfillment(self, order_id: int, fulfillment_id: int, options=None) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).get(fulfillment_id, options)

    def create_fulfillment(self, order_id: int, fulfillment: Fulfillment) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).create(fulfillment)

    def update_fulfillment(self, order_id: int, fulfillment: Fulfillment) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).update(fulfillment)

    def complete_fulfillment(self, order_id: int, fulfillment_id: int) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).complete(fulfillment_id)

    def transition_fulfillment(self, order_id: int, fulfillment_id: int) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).transition(fulfillment_id)

    def cancel_fulfillment(self, order_id: int, fulfillment_id: int) -> Fulfillment | None:
        return _FulfillmentService(self.client, order_id).cancel(fulfillment_id)
