import logging

import httpx

from ..errors import DecodeError
from ..pagination import options_to_params
from .currencies import CurrencyService
from .orders import OrderService
from .recurring_charges import RecurringApplicationChargeService

log = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-10"
DEFAULT_TIMEOUT = 60


def shop_short_name(shop_name: str) -> str:
    """``https://foo.myshopify.com/`` -> ``foo``"""
    name = str(shop_name or "").strip()
    for prefix in ("https://", "http://"):
        if name.startswith(prefix):
            name = name[len(prefix):]
    name = name.rstrip("/")
    return name.replace(".myshopify.com", "")


def shop_full_name(shop_name: str) -> str:
    return f"{shop_short_name(shop_name)}.myshopify.com"


def shop_base_url(shop_name: str) -> str:
    return f"https://{shop_full_name(shop_name)}"


class ShopifyClient:
    """One shop's Admin REST API.

    Every call opens its own ``httpx.Client``, sends a single request and
    raises ``httpx.HTTPStatusError`` for non-2xx responses.
    """

    def __init__(
        self,
        store_domain: str,
        admin_token: str = "",
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        app=None,
    ):
        self.domain = shop_full_name(store_domain)
        self.token = admin_token
        self.api_version = api_version
        self.timeout = timeout
        self.app = app
        self.base_url = shop_base_url(self.domain)
        if api_version:
            self.base = f"{self.base_url}/admin/api/{self.api_version}"
        else:
            self.base = f"{self.base_url}/admin"
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.token:
            self.headers["X-Shopify-Access-Token"] = self.token

        self.orders = OrderService(self)
        self.currencies = CurrencyService(self)
        self.recurring_application_charges = RecurringApplicationChargeService(self)

    def url(self, path: str) -> str:
        return f"{self.base}/{path.lstrip('/')}"

    def _request(self, method: str, url: str, *, params: dict | None = None, payload=None) -> httpx.Response:
        log.debug("%s %s params=%s", method, url, params)
        with httpx.Client(timeout=self.timeout) as client:
            r = client.request(method, url, headers=self.headers, params=params or None, json=payload)
            r.raise_for_status()
            return r

    @staticmethod
    def _decode(r: httpx.Response) -> dict:
        if not r.content.strip():
            return {}
        try:
            data = r.json()
        except ValueError as e:
            raise DecodeError(f"response from {r.request.url} is not JSON") from e
        if not isinstance(data, dict):
            raise DecodeError(f"response from {r.request.url} is not a JSON object")
        return data

    def get(self, path: str, options=None) -> dict:
        r = self._request("GET", self.url(path), params=options_to_params(options))
        return self._decode(r)

    def get_with_headers(self, path: str, options=None) -> tuple[dict, httpx.Headers]:
        """GET that also hands back the response headers (``Link`` for pagination)."""
        r = self._request("GET", self.url(path), params=options_to_params(options))
        return self._decode(r), r.headers

    def post(self, path: str, payload=None, options=None) -> dict:
        r = self._request("POST", self.url(path), params=options_to_params(options), payload=payload)
        return self._decode(r)

    def put(self, path: str, payload=None, options=None) -> dict:
        r = self._request("PUT", self.url(path), params=options_to_params(options), payload=payload)
        return self._decode(r)

    def delete(self, path: str) -> None:
        self._request("DELETE", self.url(path))

    def count(self, path: str, options=None) -> int:
        data = self.get(path, options)
        return int(data.get("count", 0))

    def raw_request(self, method: str, rel_path: str, payload=None) -> dict:
        """Call an unversioned path such as ``admin/oauth/access_token``."""
        url = f"{self.base_url}/{rel_path.lstrip('/')}"
        return self._decode(self._request(method, url, payload=payload))
