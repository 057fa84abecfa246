"""
Unit tests for record decoding (orders, charges, currencies, BigCommerce).
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from shopify_rest.decoding import NoteAttribute
from shopify_rest.errors import DecodeError, TimestampParseError
from shopify_rest.models.bigcommerce import BcModifier, BcOptionValue
from shopify_rest.models.charge import RecurringApplicationCharge
from shopify_rest.models.currency import Currency
from shopify_rest.models.order import LineItem, Order, ShippingLine


EST = timezone(timedelta(hours=-5))


@pytest.mark.unit
class TestOrder:
    """Tests for Order.from_dict against a full order payload."""

    def test_scalar_fields(self, sample_order):
        order = Order.from_dict(sample_order["order"])

        assert order.id == 450789469
        assert order.name == "#1001"
        assert order.subtotal_price == Decimal("597.00")
        assert order.total_price == "598.94"
        assert order.created_at == datetime(2008, 1, 10, 11, 0, 0, tzinfo=EST)
        assert order.cancelled_at is None

    def test_line_item_properties_in_every_shape(self, sample_order):
        """Test array, '{}' and single-object properties all decode to lists."""
        order = Order.from_dict(sample_order["order"])
        array_item, empty_item, single_item = order.line_items

        assert array_item.properties == [
            NoteAttribute("Custom Engraving Front", "Happy Birthday"),
            NoteAttribute("Custom Engraving Back", "Merry Christmas"),
        ]
        assert empty_item.properties == []
        assert single_item.properties == [NoteAttribute("Gift wrap", "yes")]

    def test_shipping_line_fulfillment_service_id_shapes(self, sample_order):
        """Test null/number/string requested_fulfillment_service_id become strings."""
        order = Order.from_dict(sample_order["order"])

        assert [s.requested_fulfillment_service_id for s in order.shipping_lines] == [
            "",
            "12345",
            "third-party-fs",
        ]

    def test_nested_records(self, sample_order):
        order = Order.from_dict(sample_order["order"])
        line = order.line_items[0]

        assert line.tax_lines[0].rate == Decimal("0.06")
        assert line.discount_allocations[0].amount_set.shop_money.amount == Decimal("3.33")
        assert order.billing_address.zip == "40202"
        assert order.client_details.user_agent == "Mozilla/5.0"
        assert order.discount_codes[0].amount == Decimal("10.00")
        assert order.discount_applications[0].code == "TENOFF"
        assert order.note_attributes == [NoteAttribute("custom engraving", "Happy Birthday")]

    def test_refund_transactions(self, sample_order):
        order = Order.from_dict(sample_order["order"])
        refund = order.refunds[0]
        txn = refund.transactions[0]

        assert refund.refund_line_items[0].subtotal == Decimal("195.67")
        assert txn.amount == Decimal("209.00")
        assert txn.parent_id == 801038806
        assert txn.payment_details.credit_card_company == "Visa"
        assert txn.created_at.utcoffset() == timedelta(hours=-4)

    def test_missing_collections_default_to_empty_lists(self):
        order = Order.from_dict({"id": 1})

        assert order.line_items == []
        assert order.shipping_lines == []
        assert order.note_attributes == []

    def test_to_dict_omits_unset_fields(self):
        order = Order(
            email="jane@example.com",
            line_items=[LineItem(variant_id=447654529, quantity=1, price=Decimal("9.99"))],
        )

        assert order.to_dict() == {
            "email": "jane@example.com",
            "line_items": [{"variant_id": 447654529, "quantity": 1, "price": "9.99"}],
        }

    def test_to_dict_serializes_properties_and_timestamps(self):
        item = LineItem(id=1, properties=[NoteAttribute("Engraving", "Hi")])
        order = Order(id=2, created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc), line_items=[item])

        data = order.to_dict()

        assert data["created_at"] == "2024-05-01T09:30:00+00:00"
        assert data["line_items"][0]["properties"] == [{"name": "Engraving", "value": "Hi"}]

    def test_malformed_properties_fail_the_whole_line_item(self):
        with pytest.raises(DecodeError):
            LineItem.from_dict({"id": 1, "properties": ["not", "objects"]})

    @pytest.mark.parametrize("raw", ["{}", '[{"name": "a", "value": 1}]'])
    def test_string_properties_are_rejected(self, raw):
        """Test a JSON string holding JSON text is not parsed a second time."""
        with pytest.raises(DecodeError):
            LineItem.from_dict({"id": 1, "properties": raw})

    def test_string_note_attributes_are_rejected(self):
        with pytest.raises(DecodeError):
            Order.from_dict({"id": 1, "note_attributes": "{}"})

    def test_boolean_fulfillment_service_id_is_rejected(self):
        with pytest.raises(DecodeError):
            ShippingLine.from_dict({"id": 1, "requested_fulfillment_service_id": True})

    def test_invalid_money_is_rejected(self):
        with pytest.raises(DecodeError):
            LineItem.from_dict({"id": 1, "price": "ten dollars"})


@pytest.mark.unit
class TestRecurringApplicationCharge:
    """Tests for RecurringApplicationCharge.from_dict."""

    def test_mixed_date_formats(self, sample_recurring_charge):
        charge = RecurringApplicationCharge.from_dict(sample_recurring_charge["recurring_application_charge"])

        assert charge.billing_on == datetime(2018, 6, 27)
        assert charge.trial_ends_on == datetime(2018, 7, 4)
        assert charge.activated_on is None
        assert charge.updated_at == datetime(2018, 6, 27, 8, 48, 27, tzinfo=timezone(timedelta(hours=-4)))

    def test_money_and_camel_case_fields(self, sample_recurring_charge):
        charge = RecurringApplicationCharge.from_dict(sample_recurring_charge["recurring_application_charge"])

        assert charge.price == Decimal("15.00")
        assert charge.capped_amount == Decimal("100.00")
        assert charge.currency_code == "USD"
        assert charge.test is True

    def test_pricing_blocks(self):
        charge = RecurringApplicationCharge.from_dict({
            "id": 1,
            "recurringPricing": {
                "appRecurringPricingDetails": {
                    "interval": "EVERY_30_DAYS",
                    "price": {"amount": 10, "currencyCode": "USD"},
                }
            },
            "usagePricing": {
                "appUsagePricingDetails": {
                    "cappedAmount": {"amount": "50.00", "currencyCode": "USD"},
                    "terms": "per email",
                }
            },
        })

        assert charge.recurring_pricing.details.interval == "EVERY_30_DAYS"
        assert charge.recurring_pricing.details.price.amount == Decimal("10")
        assert charge.usage_pricing.details.capped_amount.amount == Decimal("50.00")

        data = charge.to_dict()
        assert data["usagePricing"]["appUsagePricingDetails"]["cappedAmount"] == {
            "amount": "50.00",
            "currencyCode": "USD",
        }

    def test_bad_timestamp_is_reported(self):
        with pytest.raises(TimestampParseError) as exc:
            RecurringApplicationCharge.from_dict({"id": 1, "updated_at": "last tuesday"})

        assert exc.value.value == "last tuesday"


@pytest.mark.unit
class TestCurrency:

    def test_from_dict(self, sample_currencies):
        currencies = [Currency.from_dict(c) for c in sample_currencies["currencies"]]

        assert [(c.currency, c.enabled) for c in currencies] == [("CAD", True), ("EUR", False)]


@pytest.mark.unit
class TestBigCommerce:
    """Tests for BigCommerce modifier records."""

    def test_modifier_with_option_values(self):
        modifier = BcModifier.from_dict({
            "id": 206,
            "product_id": 158,
            "name": "Insurance",
            "display_name": "Add insurance",
            "type": "checkbox",
            "required": True,
            "sort_order": 1,
            "config": {"checkbox_label": "Yes please"},
            "option_values": [
                {
                    "id": 190,
                    "option_id": 206,
                    "label": "Yes",
                    "sort_order": 0,
                    "value_data": {"checked_value": True},
                    "is_default": False,
                    "adjusters": {
                        "price": {"adjuster": "relative", "adjuster_value": 5},
                        "weight": None,
                        "image_url": "",
                        "purchasing_disabled": {"status": False, "message": ""},
                    },
                }
            ],
        })

        value = modifier.option_values[0]
        assert modifier.required is True
        assert modifier.config == {"checkbox_label": "Yes please"}
        assert value.value_data == {"checked_value": True}
        assert value.adjusters.price.adjuster_value == Decimal("5")
        assert value.adjusters.purchasing_disabled.status is False

    def test_option_value(self):
        value = BcOptionValue.from_dict({"id": 1, "label": "Red", "option_id": 7, "option_display_name": "Color"})

        assert value == BcOptionValue(id=1, label="Red", option_id=7, option_display_name="Color")
