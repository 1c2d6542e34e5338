"""
Domain Models - Pure data entities of the customer API.

No HTTP dependencies. Parsing from and to the API's JSON layout only.
"""

from revolut_customer.domain.amount import Amount, MAX, MIN
from revolut_customer.domain.user import Address, User
from revolut_customer.domain.wallet import Pocket, Wallet
from revolut_customer.domain.card import Card, CardType, Issuer
from revolut_customer.domain.session import Session, SignInResponse

__all__ = [
    "Amount",
    "MAX",
    "MIN",
    "Address",
    "User",
    "Pocket",
    "Wallet",
    "Card",
    "CardType",
    "Issuer",
    "Session",
    "SignInResponse",
]
