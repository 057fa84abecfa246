"""
Order records returned by the ``orders`` endpoints.

Every record is a plain dataclass built with ``from_dict`` from the parsed
JSON body. Money is ``Decimal`` and timestamps are ``datetime``. Two fields
need more than a straight copy:

* ``LineItem.properties`` may be an array, a single object or ``{}``
  depending on when the order was placed (see ``decode_properties_value``).
* ``ShippingLine.requested_fulfillment_service_id`` may be a string, a
  number or ``null`` (see ``decode_variant_scalar``).
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from ..decoding import NoteAttribute, decode_properties_value, decode_variant_scalar
from .base import Record, record, records, to_decimal, to_timestamp
from .metafield import Metafield


@dataclass
class DiscountApplication(Record):
    target_type: str | None = None
    type: str | None = None
    value: str | None = None
    value_type: str | None = None
    allocation_method: str | None = None
    target_selection: str | None = None
    title: str | None = None
    code: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "DiscountApplication":
        return cls(
            target_type=data.get("target_type"),
            type=data.get("type"),
            value=data.get("value"),
            value_type=data.get("value_type"),
            allocation_method=data.get("allocation_method"),
            target_selection=data.get("target_selection"),
            title=data.get("title"),
            code=data.get("code"),
        )


@dataclass
class Address(Record):
    id: int | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    company: str | None = None
    country: str | None = None
    country_code: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None
    phone: str | None = None
    province: str | None = None
    province_code: str | None = None
    zip: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Address":
        return cls(**{f: data.get(f) for f in cls.__dataclass_fields__})


@dataclass
class DiscountCode(Record):
    amount: Decimal | None = None
    code: str | None = None
    type: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "DiscountCode":
        return cls(amount=to_decimal(data.get("amount")), code=data.get("code"), type=data.get("type"))


@dataclass
class AmountSetEntry(Record):
    amount: Decimal | None = None
    currency_code: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AmountSetEntry":
        return cls(amount=to_decimal(data.get("amount")), currency_code=data.get("currency_code"))


@dataclass
class AmountSet(Record):
    shop_money: AmountSetEntry | None = None
    presentment_money: AmountSetEntry | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AmountSet":
        return cls(
            shop_money=record(AmountSetEntry, data.get("shop_money")),
            presentment_money=record(AmountSetEntry, data.get("presentment_money")),
        )


@dataclass
class DiscountAllocation(Record):
    amount: Decimal | None = None
    discount_application_index: int | None = None
    amount_set: AmountSet | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "DiscountAllocation":
        return cls(
            amount=to_decimal(data.get("amount")),
            discount_application_index=data.get("discount_application_index"),
            amount_set=record(AmountSet, data.get("amount_set")),
        )


@dataclass
class TaxLine(Record):
    title: str | None = None
    price: Decimal | None = None
    rate: Decimal | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "TaxLine":
        return cls(
            title=data.get("title"),
            price=to_decimal(data.get("price")),
            rate=to_decimal(data.get("rate")),
        )


@dataclass
class AppliedDiscount(Record):
    title: str | None = None
    description: str | None = None
    value: str | None = None
    value_type: str | None = None
    amount: Decimal | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AppliedDiscount":
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            value=data.get("value"),
            value_type=data.get("value_type"),
            amount=to_decimal(data.get("amount")),
        )


@dataclass
class LineItem(Record):
    id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    quantity: int | None = None
    price: Decimal | None = None
    total_discount: Decimal | None = None
    title: str | None = None
    variant_title: str | None = None
    name: str | None = None
    sku: str | None = None
    vendor: str | None = None
    gift_card: bool | None = None
    taxable: bool | None = None
    fulfillment_service: str | None = None
    requires_shipping: bool | None = None
    variant_inventory_management: str | None = None
    pre_tax_price: Decimal | None = None
    properties: list[NoteAttribute] = field(default_factory=list)
    product_exists: bool | None = None
    fulfillable_quantity: int | None = None
    fulfillment_status: str | None = None
    tax_lines: list[TaxLine] = field(default_factory=list)
    applied_discount: AppliedDiscount | None = None
    discount_allocations: list[DiscountAllocation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        return cls(
            id=data.get("id"),
            product_id=data.get("product_id"),
            variant_id=data.get("variant_id"),
            quantity=data.get("quantity"),
            price=to_decimal(data.get("price")),
            total_discount=to_decimal(data.get("total_discount")),
            title=data.get("title"),
            variant_title=data.get("variant_title"),
            name=data.get("name"),
            sku=data.get("sku"),
            vendor=data.get("vendor"),
            gift_card=data.get("gift_card"),
            taxable=data.get("taxable"),
            fulfillment_service=data.get("fulfillment_service"),
            requires_shipping=data.get("requires_shipping"),
            variant_inventory_management=data.get("variant_inventory_management"),
            pre_tax_price=to_decimal(data.get("pre_tax_price")),
            properties=decode_properties_value(data.get("properties")),
            product_exists=data.get("product_exists"),
            fulfillable_quantity=data.get("fulfillable_quantity"),
            fulfillment_status=data.get("fulfillment_status"),
            tax_lines=records(TaxLine, data.get("tax_lines")),
            applied_discount=record(AppliedDiscount, data.get("applied_discount")),
            discount_allocations=records(DiscountAllocation, data.get("discount_allocations")),
        )


@dataclass
class PaymentDetails(Record):
    avs_result_code: str | None = None
    credit_card_bin: str | None = None
    cvv_result_code: str | None = None
    credit_card_number: str | None = None
    credit_card_company: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "PaymentDetails":
        return cls(**{f: data.get(f) for f in cls.__dataclass_fields__})


@dataclass
class ShippingLine(Record):
    id: int | None = None
    title: str | None = None
    price: Decimal | None = None
    code: str | None = None
    source: str | None = None
    phone: str | None = None
    requested_fulfillment_service_id: str = ""
    delivery_category: str | None = None
    carrier_identifier: str | None = None
    tax_lines: list[TaxLine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ShippingLine":
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            price=to_decimal(data.get("price")),
            code=data.get("code"),
            source=data.get("source"),
            phone=data.get("phone"),
            requested_fulfillment_service_id=decode_variant_scalar(
                data.get("requested_fulfillment_service_id")
            ),
            delivery_category=data.get("delivery_category"),
            carrier_identifier=data.get("carrier_identifier"),
            tax_lines=records(TaxLine, data.get("tax_lines")),
        )


@dataclass
class Transaction(Record):
    id: int | None = None
    order_id: int | None = None
    amount: Decimal | None = None
    kind: str | None = None
    gateway: str | None = None
    status: str | None = None
    message: str | None = None
    created_at: datetime | None = None
    test: bool | None = None
    authorization: str | None = None
    currency: str | None = None
    location_id: int | None = None
    user_id: int | None = None
    parent_id: int | None = None
    device_id: int | None = None
    error_code: str | None = None
    source_name: str | None = None
    source: str | None = None
    payment_details: PaymentDetails | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=data.get("id"),
            order_id=data.get("order_id"),
            amount=to_decimal(data.get("amount")),
            kind=data.get("kind"),
            gateway=data.get("gateway"),
            status=data.get("status"),
            message=data.get("message"),
            created_at=to_timestamp(data.get("created_at")),
            test=data.get("test"),
            authorization=data.get("authorization"),
            currency=data.get("currency"),
            location_id=data.get("location_id"),
            user_id=data.get("user_id"),
            parent_id=data.get("parent_id"),
            device_id=data.get("device_id"),
            error_code=data.get("error_code"),
            source_name=data.get("source_name"),
            source=data.get("source"),
            payment_details=record(PaymentDetails, data.get("payment_details")),
        )


@dataclass
class ClientDetails(Record):
    accept_language: str | None = None
    browser_height: int | None = None
    browser_ip: str | None = None
    browser_width: int | None = None
    session_hash: str | None = None
    user_agent: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ClientDetails":
        return cls(**{f: data.get(f) for f in cls.__dataclass_fields__})


@dataclass
class RefundLineItem(Record):
    id: int | None = None
    quantity: int | None = None
    line_item_id: int | None = None
    line_item: LineItem | None = None
    subtotal: Decimal | None = None
    total_tax: Decimal | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "RefundLineItem":
        return cls(
            id=data.get("id"),
            quantity=data.get("quantity"),
            line_item_id=data.get("line_item_id"),
            line_item=record(LineItem, data.get("line_item")),
            subtotal=to_decimal(data.get("subtotal")),
            total_tax=to_decimal(data.get("total_tax")),
        )


@dataclass
class Refund(Record):
    id: int | None = None
    order_id: int | None = None
    created_at: datetime | None = None
    note: str | None = None
    restock: bool | None = None
    user_id: int | None = None
    refund_line_items: list[RefundLineItem] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Refund":
        return cls(
            id=data.get("id"),
            order_id=data.get("order_id"),
            created_at=to_timestamp(data.get("created_at")),
            note=data.get("note"),
            restock=data.get("restock"),
            user_id=data.get("user_id"),
            refund_line_items=records(RefundLineItem, data.get("refund_line_items")),
            transactions=records(Transaction, data.get("transactions")),
        )


@dataclass
class Order(Record):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    order_number: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    cancelled_at: datetime | None = None
    processed_at: datetime | None = None
    subtotal_price: Decimal | None = None
    total_tax: Decimal | None = None
    taxes_included: bool | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    confirmation_number: str | None = None
    total_price: str | None = None
    total_discounts: str | None = None
    currency: str | None = None
    note: str | None = None
    note_attributes: list[NoteAttribute] = field(default_factory=list)
    billing_address: Address | None = None
    shipping_address: Address | None = None
    client_details: ClientDetails | None = None
    line_items: list[LineItem] = field(default_factory=list)
    shipping_lines: list[ShippingLine] = field(default_factory=list)
    discount_codes: list[DiscountCode] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    refunds: list[Refund] = field(default_factory=list)
    source_name: str | None = None
    tags: str | None = None
    checkout_token: str | None = None
    metafields: list[Metafield] = field(default_factory=list)
    discount_applications: list[DiscountApplication] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            email=data.get("email"),
            order_number=data.get("order_number"),
            created_at=to_timestamp(data.get("created_at")),
            updated_at=to_timestamp(data.get("updated_at")),
            cancelled_at=to_timestamp(data.get("cancelled_at")),
            processed_at=to_timestamp(data.get("processed_at")),
            subtotal_price=to_decimal(data.get("subtotal_price")),
            total_tax=to_decimal(data.get("total_tax")),
            taxes_included=data.get("taxes_included"),
            financial_status=data.get("financial_status"),
            fulfillment_status=data.get("fulfillment_status"),
            confirmation_number=data.get("confirmation_number"),
            total_price=data.get("total_price"),
            total_discounts=data.get("total_discounts"),
            currency=data.get("currency"),
            note=data.get("note"),
            note_attributes=decode_properties_value(data.get("note_attributes")),
            billing_address=record(Address, data.get("billing_address")),
            shipping_address=record(Address, data.get("shipping_address")),
            client_details=record(ClientDetails, data.get("client_details")),
            line_items=records(LineItem, data.get("line_items")),
            shipping_lines=records(ShippingLine, data.get("shipping_lines")),
            discount_codes=records(DiscountCode, data.get("discount_codes")),
            transactions=records(Transaction, data.get("transactions")),
            refunds=records(Refund, data.get("refunds")),
            source_name=data.get("source_name"),
            tags=data.get("tags"),
            checkout_token=data.get("checkout_token"),
            metafields=records(Metafield, data.get("metafields")),
            discount_applications=records(DiscountApplication, data.get("discount_applications")),
        )


@dataclass
class OrderCancelOptions(Record):
    """Body of ``POST orders/<id>/cancel.json``."""

    amount: Decimal | None = None
    currency: str | None = None
    restock: bool | None = None
    reason: str | None = None
    email: bool | None = None
    refund: Refund | None = None


def order_payload(order: Order) -> dict[str, Any]:
    return {"order": order.to_dict()}
