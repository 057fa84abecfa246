"""
Shared test fixtures and configuration for shopify-rest tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from shopify_rest import create_app
from shopify_rest.storage.shop_store import ShopStore


# Test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
API_RESPONSES_DIR = FIXTURES_DIR / "api_responses"

TEST_SHOP = "test-store.myshopify.com"
TEST_API_VERSION = "2024-10"
TEST_BASE = f"https://{TEST_SHOP}/admin/api/{TEST_API_VERSION}"


@pytest.fixture(scope="session")
def app() -> Flask:
    """Create and configure a test Flask application instance."""
    app = create_app()
    app.config.update({
        "TESTING": True,
    })
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def shop_store(tmp_path: Path) -> ShopStore:
    """A ShopStore writing into a temporary directory."""
    return ShopStore(tmp_path / "data")


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables for testing."""
    env_vars = {
        "SHOPIFY_API_KEY": "test_api_key",
        "SHOPIFY_API_SECRET": "test_api_secret",
        "SHOPIFY_REDIRECT_URL": "https://app.example.com/auth/callback",
        "SHOPIFY_SCOPE": "read_orders,write_orders",
        "SHOPIFY_STORE_DOMAIN": TEST_SHOP,
        "SHOPIFY_ADMIN_TOKEN": "test_shopify_token",
        "SHOPIFY_API_VERSION": TEST_API_VERSION,
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def shopify_client(mock_env_vars):
    """Create a ShopifyClient instance for testing."""
    from shopify_rest.services.shopify_client import ShopifyClient
    return ShopifyClient(
        store_domain=mock_env_vars["SHOPIFY_STORE_DOMAIN"],
        admin_token=mock_env_vars["SHOPIFY_ADMIN_TOKEN"],
        api_version=mock_env_vars["SHOPIFY_API_VERSION"]
    )


@pytest.fixture
def shopify_app(mock_env_vars):
    """Create an OAuth App with test credentials."""
    from shopify_rest.services.oauth import App
    return App(
        api_key=mock_env_vars["SHOPIFY_API_KEY"],
        api_secret=mock_env_vars["SHOPIFY_API_SECRET"],
        redirect_url=mock_env_vars["SHOPIFY_REDIRECT_URL"],
        scope=mock_env_vars["SHOPIFY_SCOPE"],
    )


@pytest.fixture
def wired_app(monkeypatch, shop_store, shopify_app):
    """Point the routes at a temporary store and the test OAuth app."""
    monkeypatch.setattr("shopify_rest.extensions.store", shop_store)
    monkeypatch.setattr("shopify_rest.routes.auth.store", shop_store)
    monkeypatch.setattr("shopify_rest.routes.auth.shopify_app", shopify_app)
    return shop_store


@pytest.fixture
def sample_order() -> dict:
    """Load sample Shopify order JSON fixture."""
    return load_fixture("order.json")


@pytest.fixture
def sample_recurring_charge() -> dict:
    """Load sample recurring application charge JSON fixture."""
    return load_fixture("recurring_application_charge.json")


@pytest.fixture
def sample_currencies() -> dict:
    """Load sample currencies JSON fixture."""
    return load_fixture("currencies.json")


# Helper functions for tests

def load_fixture(filename: str) -> dict:
    """Load a JSON fixture file."""
    fixture_path = API_RESPONSES_DIR / filename
    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


def link_header(**rels: str) -> str:
    """Build a Link header, e.g. link_header(next="abc", previous="def")."""
    return ", ".join(
        f'<{TEST_BASE}/orders.json?limit=50&page_info={token}>; rel="{rel}"'
        for rel, token in rels.items()
    )
