"""
Unit tests for User, Wallet, Card and Session domain models.
"""

import pytest
from datetime import date, datetime, timezone
from uuid import UUID

from revolut_customer.domain import (
    Address,
    Amount,
    Card,
    CardType,
    Session,
    SignInResponse,
    User,
    Wallet,
)
from revolut_customer.domain.card import parse_expiry_date
from revolut_customer.domain.session import is_valid_user_id
from revolut_customer.domain.user import parse_birth_date
from revolut_customer.domain.wire import from_millis, optional_millis, to_millis


def test_user_from_dict(user_payload):
    """Test user parsing from API JSON."""
    user = User.from_dict(user_payload)

    assert user.id == user_payload["id"]
    assert user.created_date == datetime(2018, 1, 1, tzinfo=timezone.utc)
    assert user.birth_date == date(1990, 5, 17)
    assert user.full_name == "Alice Martin"
    assert user.address.street_line_1 == "1 Rue de Rivoli"
    assert user.address.street_line_2 is None
    assert user.sof_state == "VERIFIED"
    assert user.email_verified is True


def test_user_serialization(user_payload):
    """Test user to_dict and from_dict."""
    user = User.from_dict(user_payload)

    data = user.to_dict()
    assert data["createdDate"] == user_payload["createdDate"]
    assert data["birthDate"] == [1990, 5, 17]
    assert data["sof"] == {"state": "VERIFIED"}

    restored = User.from_dict(data)
    assert restored == user


def test_user_missing_field(user_payload):
    """Test that incomplete payloads are rejected."""
    del user_payload["firstName"]
    with pytest.raises(KeyError):
        User.from_dict(user_payload)


def test_birth_date_parsing():
    """Test birth date sent as a 3-integer array."""
    assert parse_birth_date([2000, 2, 29]) == date(2000, 2, 29)

    with pytest.raises(ValueError):
        parse_birth_date([2000, 2])
    with pytest.raises(ValueError):
        parse_birth_date("2000-02-29")
    with pytest.raises(ValueError):
        parse_birth_date([2001, 2, 29])


def test_address_second_line():
    """Test that the optional street line round-trips under its wire name."""
    address = Address("Paris", "FR", "75001", "IDF", "1 Rue", street_line_2="Apt 4")

    data = address.to_dict()
    assert data["streetLine1"] == "1 Rue"
    assert data["streetLine2"] == "Apt 4"
    assert "streetLine2" not in Address("Paris", "FR", "75001", "IDF", "1 Rue").to_dict()


def test_wallet_from_dict(wallet_payload):
    """Test wallet and pockets parsing."""
    wallet = Wallet.from_dict(wallet_payload)

    assert wallet.reference == "12345678"
    assert wallet.base_currency == "EUR"
    assert wallet.total_topup == Amount.from_repr(1500_00)
    assert wallet.topup_reset_date == datetime(2018, 2, 1, tzinfo=timezone.utc)
    assert len(wallet.pockets) == 2

    eur = wallet.pockets[0]
    assert eur.pocket_type == "CURRENT"
    assert eur.balance == Amount.parse("175.64")
    assert wallet.to_dict() == wallet_payload


def test_wallet_rejects_fractional_balance(wallet_payload):
    """Test that balances must be whole hundredths."""
    wallet_payload["pockets"][0]["balance"] = 175.64

    with pytest.raises(ValueError):
        Wallet.from_dict(wallet_payload)


def test_wallet_pocket_lookup(wallet_payload):
    """Test finding the open pocket for a currency."""
    wallet = Wallet.from_dict(wallet_payload)

    assert wallet.pocket("eur").id == "p-eur"
    # GBP pocket is closed
    assert wallet.pocket("GBP") is None
    assert wallet.pocket("USD") is None


def test_card_from_dict(card_payload):
    """Test card parsing."""
    card = Card.from_dict(card_payload)

    assert card.id == UUID(card_payload["id"])
    assert card.owner_id == UUID(card_payload["ownerId"])
    assert card.expiry_date == date(2020, 12, 31)
    assert card.issuer.card_type is CardType.DEBIT
    assert card.issuer.name == "Test Bank"
    assert card.current_topup == Amount.min_value()
    assert card.postcode is None
    assert card.last_used_date == datetime(2018, 2, 1, tzinfo=timezone.utc)


def test_card_usable(card_payload):
    """Test card usability around its expiry date."""
    card = Card.from_dict(card_payload)

    assert card.is_usable(today=date(2020, 12, 31))
    assert not card.is_usable(today=date(2021, 1, 1))

    card.confirmed = False
    assert not card.is_usable(today=date(2020, 1, 1))


def test_card_bad_type(card_payload):
    """Test that unknown card types are rejected."""
    card_payload["issuer"]["cardType"] = "PREPAID"
    with pytest.raises(ValueError):
        Card.from_dict(card_payload)


@pytest.mark.parametrize(
    "year, month, expected",
    [
        (2020, 12, date(2020, 12, 31)),
        (2020, 2, date(2020, 2, 29)),
        (2021, 2, date(2021, 2, 28)),
        (2021, 4, date(2021, 4, 30)),
    ],
)
def test_expiry_date_last_day_of_month(year, month, expected):
    """Test that the expiry date is the last day of the month."""
    assert parse_expiry_date({"year": year, "month": month}) == expected


def test_session_hides_token():
    """Test that the access token never shows in repr or default dict."""
    session = Session(user_id="usr", access_token="secret-token")

    assert "secret-token" not in repr(session)
    assert "access_token" not in session.to_dict()
    assert session.to_dict(include_token=True)["access_token"] == "secret-token"
    assert session.basic_auth() == ("usr", "secret-token")


def test_sign_in_response(sign_in_payload):
    """Test sign-in response parsing."""
    result = SignInResponse.from_dict(sign_in_payload)

    assert result.user.id == sign_in_payload["user"]["id"]
    assert result.access_token == sign_in_payload["accessToken"]
    assert result.session.user_id == result.user.id
    assert sign_in_payload["accessToken"] not in repr(result)


def test_sign_in_response_requires_token(sign_in_payload):
    """Test that an empty access token is rejected."""
    sign_in_payload["accessToken"] = ""
    with pytest.raises(ValueError):
        SignInResponse.from_dict(sign_in_payload)


def test_user_id_validation():
    """Test UUID validation of user IDs."""
    assert is_valid_user_id("2a7ba9c1-2d4c-4b5e-9a7a-3e0b5f6c8d11")
    assert not is_valid_user_id("not-a-uuid")
    assert not is_valid_user_id("")


def test_millis_conversion():
    """Test epoch millisecond conversion and its limits."""
    moment = datetime(2018, 1, 1, tzinfo=timezone.utc)
    assert from_millis(1514764800000) == moment
    assert to_millis(moment) == 1514764800000
    assert optional_millis(None) is None

    with pytest.raises(ValueError):
        from_millis(10 ** 20)
    with pytest.raises(ValueError):
        from_millis("1514764800000")
