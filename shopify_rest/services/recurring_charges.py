from __future__ import annotations

from ..models.charge import RecurringApplicationCharge

RECURRING_CHARGES_BASE_PATH = "recurring_application_charges"


class RecurringApplicationChargeService:
    """Billing: ``recurring_application_charges`` endpoints."""

    def __init__(self, client):
        self.client = client

    @staticmethod
    def _one(data: dict) -> RecurringApplicationCharge | None:
        payload = data.get("recurring_application_charge")
        return RecurringApplicationCharge.from_dict(payload) if payload is not None else None

    @staticmethod
    def _wrap(charge: RecurringApplicationCharge) -> dict:
        return {"recurring_application_charge": charge.to_dict()}

    def create(self, charge: RecurringApplicationCharge) -> RecurringApplicationCharge | None:
        return self._one(self.client.post(f"{RECURRING_CHARGES_BASE_PATH}.json", self._wrap(charge)))

    def get(self, charge_id: int, options=None) -> RecurringApplicationCharge | None:
        return self._one(self.client.get(f"{RECURRING_CHARGES_BASE_PATH}/{charge_id}.json", options))

    def list(self, options=None) -> list[RecurringApplicationCharge]:
        data = self.client.get(f"{RECURRING_CHARGES_BASE_PATH}.json", options)
        return [
            RecurringApplicationCharge.from_dict(c)
            for c in data.get("recurring_application_charges") or []
        ]

    def activate(self, charge: RecurringApplicationCharge) -> RecurringApplicationCharge | None:
        path = f"{RECURRING_CHARGES_BASE_PATH}/{charge.id}/activate.json"
        return self._one(self.client.post(path, self._wrap(charge)))

    def delete(self, charge_id: int) -> None:
        self.client.delete(f"{RECURRING_CHARGES_BASE_PATH}/{charge_id}.json")

    def update(self, charge_id: int, new_capped_amount: int) -> RecurringApplicationCharge | None:
        """Raise the capped amount of a usage-based charge."""
        path = f"{RECURRING_CHARGES_BASE_PATH}/{charge_id}/customize.json"
        options = {"recurring_application_charge[capped_amount]": new_capped_amount}
        return self._one(self.client.put(path, options=options))
