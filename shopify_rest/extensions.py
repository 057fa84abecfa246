# shopify_rest/extensions.py
from flask_cors import CORS

from .config import Config
from .storage.shop_store import ShopStore
from .services.oauth import App
from .services.shopify_client import ShopifyClient

cors = CORS()

store = ShopStore(Config.DATA_DIR)

shopify_app = App(
    api_key=Config.SHOPIFY_API_KEY,
    api_secret=Config.SHOPIFY_API_SECRET,
    redirect_url=Config.SHOPIFY_REDIRECT_URL,
    scope=Config.SHOPIFY_SCOPE,
    api_version=Config.SHOPIFY_API_VERSION,
)


def client_for(shop: str) -> ShopifyClient | None:
    """Admin API client for an installed shop, or None if we hold no token for it."""
    token = store.get_token(shop)
    if not token:
        return None
    return ShopifyClient(
        store_domain=shop,
        admin_token=token,
        api_version=Config.SHOPIFY_API_VERSION,
        timeout=Config.SHOPIFY_TIMEOUT,
    )
