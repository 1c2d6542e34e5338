"""
Revolut Customer - Client for the private customer API

Interacts with the customer API, not to be confused with the business API.
This API is not public, and therefore it is subject to change.

Usage:
    from revolut_customer import Client, Options

    client = Client(Options(
        client_version="5.12",
        api_version="1",
        device_id="...",
        device_model="iPhone8,1",
    ))

    # Two-step sign-in
    client.sign_in(phone, pin)
    client.confirm_sign_in(phone, sms_code)

    client.user_id()
    client.access_token()
"""

__version__ = "0.1.0"

from revolut_customer.sdk.client import Client
from revolut_customer.config import Options
from revolut_customer.domain.amount import Amount
from revolut_customer.domain.session import Session, SignInResponse
from revolut_customer.domain.user import Address, User
from revolut_customer.domain.wallet import Wallet, Pocket
from revolut_customer.domain.card import Card
from revolut_customer.errors import RevolutError, ApiError

__all__ = [
    "Client",
    "Options",
    "Amount",
    "Session",
    "SignInResponse",
    "Address",
    "User",
    "Wallet",
    "Pocket",
    "Card",
    "RevolutError",
    "ApiError",
]
