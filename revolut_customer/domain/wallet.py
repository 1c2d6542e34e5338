"""
Wallet Domain Model - A user's wallet and its currency pockets.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from revolut_customer.domain.amount import Amount
from revolut_customer.domain.wire import from_millis, to_millis


@dataclass
class Pocket:
    """
    Pocket entity - the balance held in one currency.

    Domain rules:
    - currency is an ISO 4217 code
    - balance, blocked_amount and credit_limit are in that currency
    """
    id: str
    pocket_type: str
    state: str
    currency: str
    balance: Amount
    blocked_amount: Amount
    closed: bool
    credit_limit: Amount

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API's JSON layout."""
        return {
            "id": self.id,
            "type": self.pocket_type,
            "state": self.state,
            "currency": self.currency,
            "balance": self.balance.to_json(),
            "blockedAmount": self.blocked_amount.to_json(),
            "closed": self.closed,
            "creditLimit": self.credit_limit.to_json(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pocket":
        """Deserialize from the API's JSON layout."""
        return cls(
            id=data["id"],
            pocket_type=data["type"],
            state=data["state"],
            currency=data["currency"],
            balance=Amount.from_json(data["balance"]),
            blocked_amount=Amount.from_json(data["blockedAmount"]),
            closed=data["closed"],
            credit_limit=Amount.from_json(data["creditLimit"]),
        )


@dataclass
class Wallet:
    """
    Wallet entity - groups the user's pockets.

    Domain rules:
    - at most one open pocket per currency and type
    - base_currency is the currency balances are reported in
    """
    id: str
    reference: str
    state: str
    base_currency: str
    total_topup: Amount
    topup_reset_date: datetime
    pockets: List[Pocket] = field(default_factory=list)

    def pocket(self, currency: str) -> Optional[Pocket]:
        """
        Find the open pocket for a currency.

        Args:
            currency: ISO 4217 code (case-insensitive)

        Returns:
            Pocket if found, None otherwise
        """
        currency = currency.upper()
        for pocket in self.pockets:
            if pocket.currency == currency and not pocket.closed:
                return pocket
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API's JSON layout."""
        return {
            "id": self.id,
            "ref": self.reference,
            "state": self.state,
            "baseCurrency": self.base_currency,
            "totalTopup": self.total_topup.to_json(),
            "topupResetDate": to_millis(self.topup_reset_date),
            "pockets": [pocket.to_dict() for pocket in self.pockets],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Wallet":
        """Deserialize from the API's JSON layout."""
        return cls(
            id=data["id"],
            reference=data["ref"],
            state=data["state"],
            base_currency=data["baseCurrency"],
            total_topup=Amount.from_json(data["totalTopup"]),
            topup_reset_date=from_millis(data["topupResetDate"]),
            pockets=[Pocket.from_dict(item) for item in data.get("pockets", [])],
        )
