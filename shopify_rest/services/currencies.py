from ..models.currency import Currency


class CurrencyService:
    """Currencies enabled on the shop."""

    def __init__(self, client):
        self.client = client

    def get(self, options=None) -> list[Currency]:
        data = self.client.get("currencies.json", options)
        return [Currency.from_dict(c) for c in data.get("currencies") or []]
