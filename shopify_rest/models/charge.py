"""
Recurring application charge records.

The billing endpoints return ``activated_on``/``billing_on``/``trial_ends_on``
as plain dates (``2013-06-27``) and ``created_at``/``updated_at`` as full
RFC 3339 timestamps, sometimes on the same charge; all of them go through
``parse_flexible_timestamp``.

The GraphQL-style pricing blocks keep their camelCase wire names.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .base import Record, record, to_decimal, to_timestamp


@dataclass
class MoneyInput(Record):
    amount: Decimal | None = None
    currency_code: str | None = field(default=None, metadata={"json": "currencyCode"})

    @classmethod
    def from_dict(cls, data: dict) -> "MoneyInput":
        return cls(amount=to_decimal(data.get("amount")), currency_code=data.get("currencyCode"))


@dataclass
class AppRecurringPricingDetails(Record):
    interval: str | None = None
    price: MoneyInput | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AppRecurringPricingDetails":
        return cls(interval=data.get("interval"), price=record(MoneyInput, data.get("price")))


@dataclass
class AppPlanRecurringPricing(Record):
    details: AppRecurringPricingDetails | None = field(
        default=None, metadata={"json": "appRecurringPricingDetails"}
    )

    @classmethod
    def from_dict(cls, data: dict) -> "AppPlanRecurringPricing":
        return cls(details=record(AppRecurringPricingDetails, data.get("appRecurringPricingDetails")))


@dataclass
class AppUsagePricingDetails(Record):
    capped_amount: MoneyInput | None = field(default=None, metadata={"json": "cappedAmount"})
    terms: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AppUsagePricingDetails":
        return cls(capped_amount=record(MoneyInput, data.get("cappedAmount")), terms=data.get("terms"))


@dataclass
class AppPlanUsagePricing(Record):
    details: AppUsagePricingDetails | None = field(
        default=None, metadata={"json": "appUsagePricingDetails"}
    )

    @classmethod
    def from_dict(cls, data: dict) -> "AppPlanUsagePricing":
        return cls(details=record(AppUsagePricingDetails, data.get("appUsagePricingDetails")))


@dataclass
class RecurringApplicationCharge(Record):
    id: int | None = None
    name: str | None = None
    price: Decimal | None = None
    status: str | None = None
    test: bool | None = None
    return_url: str | None = None
    confirmation_url: str | None = None
    currency_code: str | None = field(default=None, metadata={"json": "currencyCode"})
    interval: str | None = None
    recurring_pricing: AppPlanRecurringPricing | None = field(
        default=None, metadata={"json": "recurringPricing"}
    )
    capped_amount: Decimal | None = None
    terms: str | None = None
    usage_pricing: AppPlanUsagePricing | None = field(default=None, metadata={"json": "usagePricing"})
    trial_days: int | None = None
    activated_on: datetime | None = None
    billing_on: datetime | None = None
    cancelled_on: datetime | None = None
    trial_ends_on: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "RecurringApplicationCharge":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            price=to_decimal(data.get("price")),
            status=data.get("status"),
            test=data.get("test"),
            return_url=data.get("return_url"),
            confirmation_url=data.get("confirmation_url"),
            currency_code=data.get("currencyCode"),
            interval=data.get("interval"),
            recurring_pricing=record(AppPlanRecurringPricing, data.get("recurringPricing")),
            capped_amount=to_decimal(data.get("capped_amount")),
            terms=data.get("terms"),
            usage_pricing=record(AppPlanUsagePricing, data.get("usagePricing")),
            trial_days=data.get("trial_days"),
            activated_on=to_timestamp(data.get("activated_on")),
            billing_on=to_timestamp(data.get("billing_on")),
            cancelled_on=to_timestamp(data.get("cancelled_on")),
            trial_ends_on=to_timestamp(data.get("trial_ends_on")),
            created_at=to_timestamp(data.get("created_at")),
            updated_at=to_timestamp(data.get("updated_at")),
        )
