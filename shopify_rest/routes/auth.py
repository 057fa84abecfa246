import re
import secrets

from flask import Blueprint, request, jsonify, redirect, current_app

from ..errors import WebhookVerificationError
from ..extensions import store, shopify_app
from ..services.shopify_client import shop_full_name

bp = Blueprint("auth", __name__)

SHOP_DOMAIN_HEADER = "X-Shopify-Shop-Domain"
UNINSTALLED_TOPIC = "app/uninstalled"

_SHOP_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9\-]*\.myshopify\.com$")


def _shop_param() -> str | None:
    shop = shop_full_name(request.args.get("shop", ""))
    return shop if _SHOP_RE.match(shop) else None


@bp.get("/auth/install")
def install():
    shop = _shop_param()
    if not shop:
        return jsonify({"error": "Missing or invalid shop"}), 400

    state = secrets.token_urlsafe(24)
    store.save_state(shop, state)
    return redirect(shopify_app.authorize_url(shop, state))


@bp.get("/auth/callback")
def callback():
    shop = _shop_param()
    if not shop:
        return jsonify({"error": "Missing or invalid shop"}), 400

    if not shopify_app.verify_authorization_url(request.url):
        current_app.logger.warning("OAuth callback for %s failed HMAC check", shop)
        return jsonify({"error": "Invalid hmac"}), 401

    expected_state = store.pop_state(shop)
    if not expected_state or not secrets.compare_digest(expected_state, request.args.get("state", "")):
        return jsonify({"error": "Invalid state"}), 401

    code = request.args.get("code")
    if not code:
        return jsonify({"error": "Missing code"}), 400

    try:
        token = shopify_app.get_access_token(shop, code)
    except Exception as e:
        current_app.logger.exception("Access token exchange failed for %s", shop)
        return jsonify({"error": str(e)}), 502

    store.save_shop(shop, token, scope=shopify_app.scope)
    return jsonify({"ok": True, "shop": shop})


@bp.post("/webhooks/<path:topic>")
def webhook(topic):
    try:
        shopify_app.verify_webhook_request_verbose(request)
    except WebhookVerificationError as e:
        current_app.logger.warning("Rejected webhook %s: %s", topic, e)
        return jsonify({"error": str(e)}), 401

    shop = request.headers.get(SHOP_DOMAIN_HEADER, "")
    current_app.logger.info("Webhook %s from %s", topic, shop or "unknown shop")
    if topic == UNINSTALLED_TOPIC and shop:
        store.remove_shop(shop)
    return jsonify({"ok": True})
