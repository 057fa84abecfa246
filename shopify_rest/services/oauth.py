"""
OAuth and request signing for Shopify apps.

``App`` carries the app's API key/secret and knows how to

* build the install (authorize) URL for a shop,
* exchange an authorization code or a session token for an access token,
* verify the HMAC Shopify adds to OAuth callbacks and webhooks,
* uninstall itself from a shop.
"""
import base64
import binascii
import hashlib
import hmac
import logging
from urllib.parse import parse_qsl, urlencode, urlsplit

from ..errors import WebhookVerificationError
from .shopify_client import DEFAULT_API_VERSION, ShopifyClient, shop_base_url

log = logging.getLogger(__name__)

ACCESS_TOKEN_REL_PATH = "admin/oauth/access_token"
UNINSTALL_REL_PATH = "admin/api_permissions/current.json"
SHOPIFY_CHECKSUM_HEADER = "X-Shopify-Hmac-Sha256"

ID_TOKEN_TYPE = "urn:ietf:params:oauth:token-type:id_token"
TOKEN_EXCHANGE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:token-exchange"
OFFLINE_ACCESS_TOKEN_TYPE = "urn:shopify:params:oauth:token-type:offline-access-token"
ONLINE_ACCESS_TOKEN_TYPE = "urn:shopify:params:oauth:token-type:online-access-token"


def _request_body(request) -> bytes:
    # werkzeug/Flask requests keep the body readable with cache=True
    if hasattr(request, "get_data"):
        return request.get_data(cache=True)
    return request.content


class App:
    def __init__(
        self,
        api_key: str,
        api_secret: str,
        redirect_url: str = "",
        scope: str = "",
        api_version: str = DEFAULT_API_VERSION,
        client: ShopifyClient | None = None,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.redirect_url = redirect_url
        self.scope = scope
        self.api_version = api_version
        self.client = client

    def _client(self, shop_name: str, access_token: str = "") -> ShopifyClient:
        if self.client is not None:
            return self.client
        return ShopifyClient(shop_name, access_token, api_version=self.api_version, app=self)

    def authorize_url(self, shop_name: str, state: str) -> str:
        """Install URL for ``shop_name``; ``state`` comes back on the callback."""
        query = urlencode(sorted({
            "client_id": self.api_key,
            "redirect_uri": self.redirect_url,
            "scope": self.scope,
            "state": state,
        }.items()))
        return f"{shop_base_url(shop_name)}/admin/oauth/authorize?{query}"

    def _exchange(self, shop_name: str, payload: dict) -> dict:
        payload = {"client_id": self.api_key, "client_secret": self.api_secret, **payload}
        return self._client(shop_name).raw_request("POST", ACCESS_TOKEN_REL_PATH, payload)

    def get_access_token(self, shop_name: str, code: str) -> str:
        data = self._exchange(shop_name, {"code": code})
        log.info("Obtained access token for %s", shop_name)
        return data.get("access_token", "")

    def _token_exchange(self, shop_name: str, session_token: str, requested_token_type: str) -> dict:
        return self._exchange(shop_name, {
            "subject_token": session_token,
            "subject_token_type": ID_TOKEN_TYPE,
            "grant_type": TOKEN_EXCHANGE_GRANT_TYPE,
            "requested_token_type": requested_token_type,
        })

    def get_offline_access_token(self, shop_name: str, session_token: str) -> str:
        data = self._token_exchange(shop_name, session_token, OFFLINE_ACCESS_TOKEN_TYPE)
        return data.get("access_token", "")

    def get_name_and_email_from_online_access_token(self, shop_name: str, session_token: str) -> tuple[str, str]:
        """Return ``(first_name, email)`` of the staff member behind ``session_token``."""
        data = self._token_exchange(shop_name, session_token, ONLINE_ACCESS_TOKEN_TYPE)
        user = data.get("associated_user") or {}
        return user.get("first_name", ""), user.get("email", "")

    def uninstall(self, shop_name: str, access_token: str) -> None:
        self._client(shop_name, access_token).raw_request("DELETE", UNINSTALL_REL_PATH)
        log.info("Uninstalled app from %s", shop_name)

    def _digest(self, message: bytes) -> bytes:
        return hmac.new(self.api_secret.encode("utf-8"), message, hashlib.sha256).digest()

    def verify_message(self, message: str | bytes, message_mac: str) -> bool:
        """Check a hex-encoded HMAC-SHA256 of ``message``."""
        if isinstance(message, str):
            message = message.encode("utf-8")
        try:
            actual = bytes.fromhex(message_mac or "")
        except ValueError:
            return False
        return hmac.compare_digest(actual, self._digest(message))

    def verify_authorization_url(self, url: str) -> bool:
        """Verify the ``hmac`` query parameter of an OAuth callback URL."""
        pairs = parse_qsl(urlsplit(url).query, keep_blank_values=True)
        message_mac = next((v for k, v in pairs if k == "hmac"), "")
        rest = sorted(((k, v) for k, v in pairs if k not in ("hmac", "signature")), key=lambda kv: kv[0])
        message = "&".join(f"{k}={v}" for k, v in rest)
        return self.verify_message(message, message_mac)

    def verify_webhook(self, body: bytes, hmac_header: str | None) -> bool:
        expected = base64.b64encode(self._digest(body))
        return hmac.compare_digest((hmac_header or "").encode("utf-8"), expected)

    def verify_webhook_request(self, request) -> bool:
        """Verify a webhook request; the body stays readable afterwards."""
        return self.verify_webhook(_request_body(request), request.headers.get(SHOPIFY_CHECKSUM_HEADER))

    def verify_webhook_request_verbose(self, request) -> bool:
        """Like ``verify_webhook_request`` but raises with the reason on failure."""
        if not self.api_secret:
            raise WebhookVerificationError("api secret is empty")

        header = request.headers.get(SHOPIFY_CHECKSUM_HEADER)
        if not header:
            raise WebhookVerificationError(f"header {SHOPIFY_CHECKSUM_HEADER} not set")

        try:
            received = base64.b64decode(header, validate=True)
        except binascii.Error as e:
            raise WebhookVerificationError(f"header {SHOPIFY_CHECKSUM_HEADER} is not valid base64") from e
        if len(received) != 32:
            raise WebhookVerificationError(
                f"received HMAC is not of length 32, it is of length {len(received)}"
            )

        body = _request_body(request)
        if not body:
            raise WebhookVerificationError("request body is empty")

        computed = self._digest(body)
        if not hmac.compare_digest(received, computed):
            raise WebhookVerificationError(
                f"expected hash {computed.hex()} does not equal {received.hex()}"
            )
        return True
