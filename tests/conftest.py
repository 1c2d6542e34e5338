"""
Shared fixtures: client options and API payloads.
"""

import pytest

from revolut_customer import Options

USER_ID = "2a7ba9c1-2d4c-4b5e-9a7a-3e0b5f6c8d11"
ACCESS_TOKEN = "b5a2c6e0-1f7e-4c1b-8a90-tok3n"


@pytest.fixture
def options():
    """Options with every header set."""
    return Options(
        client_version="5.12",
        api_version="1",
        device_id="device-123",
        device_model="iPhone8,1",
        user_agent="TestAgent/1.0",
    )


@pytest.fixture
def address_payload():
    return {
        "city": "Paris",
        "country": "FR",
        "postcode": "75001",
        "region": "Ile-de-France",
        "streetLine1": "1 Rue de Rivoli",
    }


@pytest.fixture
def user_payload(address_payload):
    return {
        "id": USER_ID,
        "createdDate": 1514764800000,  # 2018-01-01T00:00:00Z
        "address": address_payload,
        "birthDate": [1990, 5, 17],
        "firstName": "Alice",
        "lastName": "Martin",
        "phone": "+33612345678",
        "email": "alice@example.com",
        "emailVerified": True,
        "state": "ACTIVE",
        "referralCode": "alicem1",
        "kyc": "PASSED",
        "termsVersion": "2018-05-25",
        "underReview": False,
        "riskAssessed": True,
        "locale": "fr_FR",
        "sof": {"state": "VERIFIED"},
    }


@pytest.fixture
def wallet_payload():
    return {
        "id": "w-1",
        "ref": "12345678",
        "state": "ACTIVE",
        "baseCurrency": "EUR",
        "totalTopup": 150000,
        "topupResetDate": 1517443200000,  # 2018-02-01T00:00:00Z
        "pockets": [
            {
                "id": "p-eur",
                "type": "CURRENT",
                "state": "ACTIVE",
                "currency": "EUR",
                "balance": 17564,
                "blockedAmount": 0,
                "closed": False,
                "creditLimit": 0,
            },
            {
                "id": "p-gbp",
                "type": "CURRENT",
                "state": "ACTIVE",
                "currency": "GBP",
                "balance": 500,
                "blockedAmount": 100,
                "closed": True,
                "creditLimit": 0,
            },
        ],
    }


@pytest.fixture
def card_payload(address_payload):
    return {
        "id": "7f0c6f3e-8d1a-4c8e-9a36-5b2d1c0e9f44",
        "ownerId": USER_ID,
        "lastFour": "4242",
        "brand": "VISA",
        "expiryDate": {"year": 2020, "month": 12},
        "expired": False,
        "threeDVerified": True,
        "address": address_payload,
        "postcode": None,
        "issuer": {
            "bin": "424242",
            "name": "Test Bank",
            "cardType": "DEBIT",
            "cardBrand": "VISA",
            "country": "FR",
            "currency": "EUR",
            "supported": True,
            "fee": 0.0,
            "postcodeRequired": False,
        },
        "currency": "EUR",
        "confirmed": True,
        "confirmationAttempts": 1,
        "autoTopup": "DISABLED",
        "autoTopupReason": "",
        "createdDate": 1514764800000,
        "updatedDate": 1514764800000,
        "associatedBankType": "NONE",
        "lastUsedDate": 1517443200000,
        "currentTopup": 0,
        "creditRepayment": False,
    }


@pytest.fixture
def sign_in_payload(user_payload, wallet_payload):
    return {
        "user": user_payload,
        "wallet": wallet_payload,
        "accessToken": ACCESS_TOKEN,
    }
