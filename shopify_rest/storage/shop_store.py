from datetime import datetime, timezone
from pathlib import Path
import json
from typing import Any, Dict, List

SHOPS_COLLECTION = "shops"
STATES_COLLECTION = "oauth_states"


class ShopStore:
    """Installed shops and pending OAuth states, kept as JSON files on disk.

    One file per collection, keyed by the shop's ``*.myshopify.com`` name.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _load(self, collection: str) -> Dict[str, Any]:
        p = self._path(collection)
        if not p.exists():
            return {}
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, collection: str, obj: Dict[str, Any]):
        self.data_dir.mkdir(parents=True, exist_ok=True)
        p = self._path(collection)
        with p.open("w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)

    def list_shops(self) -> List[Dict[str, Any]]:
        return list(self._load(SHOPS_COLLECTION).values())

    def get_shop(self, shop: str) -> Dict[str, Any] | None:
        return self._load(SHOPS_COLLECTION).get(shop)

    def get_token(self, shop: str) -> str | None:
        entry = self.get_shop(shop)
        return entry.get("access_token") if entry else None

    def save_shop(self, shop: str, access_token: str, scope: str = ""):
        data = self._load(SHOPS_COLLECTION)
        data[shop] = {
            "shop": shop,
            "access_token": access_token,
            "scope": scope,
            "installed_at": datetime.now(timezone.utc).isoformat(),
        }
        self._save(SHOPS_COLLECTION, data)

    def remove_shop(self, shop: str):
        data = self._load(SHOPS_COLLECTION)
        data.pop(shop, None)
        self._save(SHOPS_COLLECTION, data)

    def save_state(self, shop: str, state: str):
        data = self._load(STATES_COLLECTION)
        data[shop] = state
        self._save(STATES_COLLECTION, data)

    def pop_state(self, shop: str) -> str | None:
        """Return and forget the pending OAuth state for ``shop``."""
        data = self._load(STATES_COLLECTION)
        state = data.pop(shop, None)
        self._save(STATES_COLLECTION, data)
        return state
