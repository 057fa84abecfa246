import httpx
from flask import Blueprint, request, jsonify, current_app

from ..errors import ShopifyError
from ..extensions import client_for
from ..pagination import ListOptions
from ..services.orders import OrderListOptions
from ..services.shopify_client import shop_full_name

bp = Blueprint("api", __name__)

MAX_PAGE_SIZE = 250


def _not_installed(shop: str):
    return jsonify({"error": f"Shop {shop} is not installed"}), 404


@bp.get("/shops/<shop>/orders")
def api_list_orders(shop):
    shop = shop_full_name(shop)
    client = client_for(shop)
    if client is None:
        return _not_installed(shop)

    page_info = request.args.get("page_info", "")
    limit = max(1, min(request.args.get("limit", 50, type=int), MAX_PAGE_SIZE))
    options = OrderListOptions(list_options=ListOptions(page_info=page_info, limit=limit))
    # Shopify rejects filters next to page_info
    if not page_info:
        options.status = request.args.get("status", "any")

    try:
        orders, pagination = client.orders.list_with_pagination(options)
    except (httpx.HTTPError, ShopifyError) as e:
        current_app.logger.exception("Failed to list orders for %s", shop)
        return jsonify({"error": str(e)}), 502

    return jsonify({
        "orders": [o.to_dict() for o in orders],
        "next_page_info": pagination.next_page_info,
        "previous_page_info": pagination.previous_page_info,
    })


@bp.get("/shops/<shop>/currencies")
def api_list_currencies(shop):
    shop = shop_full_name(shop)
    client = client_for(shop)
    if client is None:
        return _not_installed(shop)

    try:
        currencies = client.currencies.get()
    except (httpx.HTTPError, ShopifyError) as e:
        current_app.logger.exception("Failed to list currencies for %s", shop)
        return jsonify({"error": str(e)}), 502

    return jsonify([c.to_dict() for c in currencies])


@bp.get("/shops/<shop>/charges")
def api_list_charges(shop):
    shop = shop_full_name(shop)
    client = client_for(shop)
    if client is None:
        return _not_installed(shop)

    try:
        charges = client.recurring_application_charges.list()
    except (httpx.HTTPError, ShopifyError) as e:
        current_app.logger.exception("Failed to list recurring charges for %s", shop)
        return jsonify({"error": str(e)}), 502

    return jsonify([c.to_dict() for c in charges])
