"""
Card Domain Model - Payment cards linked to the user's account.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Any, Optional
from uuid import UUID

from revolut_customer.domain.amount import Amount
from revolut_customer.domain.user import Address
from revolut_customer.domain.wire import from_millis, optional_millis, to_millis


class CardType(Enum):
    """Card funding type."""
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


def parse_expiry_date(value: Dict[str, Any]) -> date:
    """
    Parse a card expiry sent as {"year": ..., "month": ...}.

    A card is valid until the last day of its expiry month.
    """
    year = int(value["year"])
    month = int(value["month"])
    return date(year, month, calendar.monthrange(year, month)[1])


@dataclass
class Issuer:
    """
    Card issuer information, keyed by the card's BIN.
    """
    bin: str
    card_type: CardType
    card_brand: str
    country: str
    currency: str
    supported: bool
    fee: float
    postcode_required: bool
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bin": self.bin,
            "name": self.name,
            "cardType": self.card_type.value,
            "cardBrand": self.card_brand,
            "country": self.country,
            "currency": self.currency,
            "supported": self.supported,
            "fee": self.fee,
            "postcodeRequired": self.postcode_required,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issuer":
        return cls(
            bin=data["bin"],
            name=data.get("name"),
            card_type=CardType(data["cardType"]),
            card_brand=data["cardBrand"],
            country=data["country"],
            currency=data["currency"],
            supported=data["supported"],
            fee=float(data["fee"]),
            postcode_required=data["postcodeRequired"],
        )


@dataclass
class Card:
    """
    Card entity - an external card used to top up the account.

    Domain rules:
    - id and owner_id are UUIDs
    - expiry_date is the last day of the expiry month
    - only the last four digits of the number are known
    """
    id: UUID
    owner_id: UUID
    last_four: str
    brand: str
    expiry_date: date
    expired: bool
    three_d_verified: bool
    address: Address
    issuer: Issuer
    currency: str
    confirmed: bool
    confirmation_attempts: int
    auto_topup: str
    auto_topup_reason: str
    created_date: datetime
    updated_date: datetime
    associated_bank_type: str
    current_topup: Amount
    credit_repayment: bool
    postcode: Optional[str] = None
    last_used_date: Optional[datetime] = None

    def is_usable(self, today: Optional[date] = None) -> bool:
        """Check if the card is confirmed and not past its expiry date."""
        today = today or date.today()
        return self.confirmed and not self.expired and today <= self.expiry_date

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API's JSON layout."""
        return {
            "id": str(self.id),
            "ownerId": str(self.owner_id),
            "lastFour": self.last_four,
            "brand": self.brand,
            "expiryDate": {"year": self.expiry_date.year, "month": self.expiry_date.month},
            "expired": self.expired,
            "threeDVerified": self.three_d_verified,
            "address": self.address.to_dict(),
            "postcode": self.postcode,
            "issuer": self.issuer.to_dict(),
            "currency": self.currency,
            "confirmed": self.confirmed,
            "confirmationAttempts": self.confirmation_attempts,
            "autoTopup": self.auto_topup,
            "autoTopupReason": self.auto_topup_reason,
            "createdDate": to_millis(self.created_date),
            "updatedDate": to_millis(self.updated_date),
            "associatedBankType": self.associated_bank_type,
            "lastUsedDate": to_millis(self.last_used_date) if self.last_used_date else None,
            "currentTopup": self.current_topup.to_json(),
            "creditRepayment": self.credit_repayment,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Deserialize from the API's JSON layout."""
        return cls(
            id=UUID(data["id"]),
            owner_id=UUID(data["ownerId"]),
            last_four=data["lastFour"],
            brand=data["brand"],
            expiry_date=parse_expiry_date(data["expiryDate"]),
            expired=data["expired"],
            three_d_verified=data["threeDVerified"],
            address=Address.from_dict(data["address"]),
            postcode=data.get("postcode"),
            issuer=Issuer.from_dict(data["issuer"]),
            currency=data["currency"],
            confirmed=data["confirmed"],
            confirmation_attempts=int(data["confirmationAttempts"]),
            auto_topup=data["autoTopup"],
            auto_topup_reason=data["autoTopupReason"],
            created_date=from_millis(data["createdDate"]),
            updated_date=from_millis(data["updatedDate"]),
            associated_bank_type=data["associatedBankType"],
            last_used_date=optional_millis(data.get("lastUsedDate")),
            current_topup=Amount.from_json(data["currentTopup"]),
            credit_repayment=data["creditRepayment"],
        )
