"""
Login Example - Get a user ID and access token with phone, PIN and SMS code.

Client options are read from REVOLUT_* environment variables or a .env file.
Set SAVE_SESSION=1 to keep the session in REVOLUT_USER_ID and
REVOLUT_ACCESS_TOKEN for the rest of the process.
"""

import os
import sys
from getpass import getpass

from revolut_customer import Client, RevolutError
from revolut_customer.adapters import EnvCredentialAdapter
from revolut_customer.logging_config import init_logging


def run():
    print("Welcome to Revolut client login example.")

    phone = input("Phone: ").strip()
    pin = getpass("Password/PIN: ").strip()

    print(f"\nTrying to sign in phone {phone}")
    with Client() as client:
        client.sign_in(phone, pin)

        print("Log in successful, you should receive an SMS with the code")
        code = input("Code: ").strip()

        result = client.confirm_sign_in(phone, code)

        print(f"\nSigned in as {result.user.full_name}")
        print(f"User ID: {client.user_id()}")
        print(f"Access token: {client.access_token()}")

        for pocket in result.wallet.pockets:
            print(f"  {pocket.currency}: {pocket.balance:.2}")

        if os.environ.get("SAVE_SESSION") == "1":
            client.save_auth(EnvCredentialAdapter())


def main():
    init_logging(os.environ.get("REVOLUT_LOG_LEVEL", "WARNING"))
    try:
        run()
    except RevolutError as e:
        print(f"error: {e}")
        cause = e.__cause__
        while cause is not None:
            print(f"caused by: {cause}")
            cause = cause.__cause__
        sys.exit(1)


if __name__ == "__main__":
    main()
