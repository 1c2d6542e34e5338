"""
Current User Example - Reuse a saved session to read profile, wallet and cards.

Expects REVOLUT_USER_ID and REVOLUT_ACCESS_TOKEN in the environment
(see login.py).
"""

from revolut_customer import Client
from revolut_customer.adapters import EnvCredentialAdapter


def main():
    with Client() as client:
        if not client.load_auth(EnvCredentialAdapter()):
            print("No saved session, run login.py first")
            return

        user, wallet = client.current_user()
        print(f"User: {user.full_name} <{user.email}>")
        print(f"Address: {user.address.street_line_1}, {user.address.city}")

        print(f"\nWallet {wallet.reference} ({wallet.base_currency})")
        for pocket in wallet.pockets:
            print(f"  {pocket.currency} {pocket.pocket_type}: {pocket.balance:.2}")

        cards = client.current_user_cards()
        print(f"\n{len(cards)} card(s)")
        for card in cards:
            print(f"  {card.brand} *{card.last_four} expires {card.expiry_date}")


if __name__ == "__main__":
    main()
