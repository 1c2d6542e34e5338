"""
Client - SDK for the private customer API.

Wraps the two-step sign-in flow and the user endpoints that become
available once a session exists.
"""

import logging
from typing import Optional, Dict, Any, List, Tuple

import httpx

from revolut_customer.config import Options
from revolut_customer.domain.card import Card
from revolut_customer.domain.session import Session, SignInResponse, is_valid_user_id
from revolut_customer.domain.user import Address, User
from revolut_customer.domain.wallet import Wallet
from revolut_customer.errors import (
    BadRequestError,
    InvalidAccessTokenError,
    InvalidUserIdError,
    NotLoggedInError,
    ParseResponseError,
    RequestFailedError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from revolut_customer.ports.credential_port import CredentialPort

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "signin"
CONFIRM_SIGN_IN_PATH = "signin/confirm"
CURRENT_USER_PATH = "user/current"
CURRENT_USER_WALLET_PATH = "user/current/wallet"
CURRENT_USER_CARDS_PATH = "user/current/cards"


class Client:
    """
    Customer API client.

    Example:
        from revolut_customer import Client

        with Client() as client:
            client.sign_in("+1555555555", "9999")
            # An SMS with a code is sent to the phone
            client.confirm_sign_in("+1555555555", "111-111")

            user, wallet = client.current_user()
            print(client.user_id(), client.access_token())
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            options: Client options (default: loaded from the environment)
            transport: Optional httpx transport, for proxies or tests

        Raises:
            ConfigurationError: If options are not given and the environment
                does not provide them
        """
        self._options = options if options is not None else Options.from_env()
        self._http = httpx.Client(
            base_url=self._options.base_url,
            headers=self._options.headers(),
            timeout=self._options.timeout,
            transport=transport,
        )
        self._session: Optional[Session] = None

    @property
    def options(self) -> Options:
        return self._options

    def close(self):
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info):
        self.close()

    # Session state

    def user_id(self) -> Optional[str]:
        """User ID of the current session, if signed in."""
        return self._session.user_id if self._session else None

    def access_token(self) -> Optional[str]:
        """Access token of the current session, if signed in."""
        return self._session.access_token if self._session else None

    def session(self) -> Optional[Session]:
        return self._session

    def is_authenticated(self) -> bool:
        return self._session is not None

    def set_auth(self, user_id: str, access_token: str) -> Session:
        """
        Load a session obtained earlier.

        Args:
            user_id: User ID (UUID string)
            access_token: Access token returned by confirm_sign_in

        Returns:
            The new session

        Raises:
            InvalidUserIdError: If user_id is not a UUID
            InvalidAccessTokenError: If access_token is empty
        """
        if not is_valid_user_id(user_id):
            raise InvalidUserIdError(user_id)
        if not access_token:
            raise InvalidAccessTokenError()

        self._session = Session(user_id=user_id, access_token=access_token)
        return self._session

    def clear_auth(self):
        """Forget the current session."""
        self._session = None

    def load_auth(self, credentials: CredentialPort) -> bool:
        """
        Load the session from a credential store.

        Args:
            credentials: Credential adapter

        Returns:
            True if a session was found and loaded

        Raises:
            InvalidUserIdError: If the stored user ID is not a UUID
        """
        stored = credentials.load_session()
        if stored is None:
            return False

        self.set_auth(stored.user_id, stored.access_token)
        return True

    def save_auth(self, credentials: CredentialPort):
        """
        Save the current session to a credential store.

        Raises:
            NotLoggedInError: If there is no session to save
        """
        credentials.save_session(self._require_session())

    # Sign-in flow

    def sign_in(self, phone_number: str, pin: str):
        """
        Start signing the user in.

        On success the API sends an SMS with a confirmation code to the
        phone; pass it to confirm_sign_in().

        Args:
            phone_number: Phone number in international format ("+1555555555")
            pin: Password / PIN of the account

        Raises:
            UnauthorizedError: If the phone/PIN pair is rejected
            UnexpectedStatusError: On any other non-2xx status
            RequestFailedError: If the request could not be performed
        """
        response = self._request(
            "POST",
            SIGN_IN_PATH,
            json={"phone": phone_number, "password": pin},
        )
        self._check(response)
        logger.info("Sign-in challenge sent for phone ending in %s", phone_number[-2:])

    def confirm_sign_in(self, phone_number: str, sms_code: str) -> SignInResponse:
        """
        Finish signing the user in.

        The SMS code may contain dashes ("111-111"); they are removed before
        sending. The returned user ID and access token are kept on the
        client for later calls.

        Args:
            phone_number: Same phone number given to sign_in()
            sms_code: Code received by SMS

        Returns:
            Sign-in response with user, wallet and access token

        Raises:
            UnauthorizedError: If the code is rejected
            UnexpectedStatusError: On any other non-2xx status
            ParseResponseError: If the response body is not as expected
            RequestFailedError: If the request could not be performed
        """
        response = self._request(
            "POST",
            CONFIRM_SIGN_IN_PATH,
            json={"phone": phone_number, "code": sms_code.replace("-", "")},
        )
        self._check(response)

        result = self._parse(response, SignInResponse.from_dict)
        self._session = result.session
        logger.info("Signed in as user %s", result.user.id)
        return result

    # User endpoints

    def current_user(self) -> Tuple[User, Wallet]:
        """
        Get the signed-in user's profile and wallet.

        Raises:
            NotLoggedInError: If the client has no session
        """
        response = self._authed_request("GET", CURRENT_USER_PATH)
        self._check(response)

        def build(data: Dict[str, Any]) -> Tuple[User, Wallet]:
            return User.from_dict(data["user"]), Wallet.from_dict(data["wallet"])

        return self._parse(response, build)

    def current_user_wallet(self) -> Wallet:
        """
        Get the signed-in user's wallet.

        Raises:
            NotLoggedInError: If the client has no session
        """
        response = self._authed_request("GET", CURRENT_USER_WALLET_PATH)
        self._check(response)
        return self._parse(response, Wallet.from_dict)

    def current_user_cards(self) -> List[Card]:
        """
        Get the cards linked to the signed-in user.

        Raises:
            NotLoggedInError: If the client has no session
        """
        response = self._authed_request("GET", CURRENT_USER_CARDS_PATH)
        self._check(response)

        def build(data: Any) -> List[Card]:
            if not isinstance(data, list):
                raise TypeError(f"expected a list of cards, got {type(data).__name__}")
            return [Card.from_dict(item) for item in data]

        return self._parse(response, build)

    def change_current_user_address(self, address: Address):
        """
        Set the signed-in user's postal address.

        Args:
            address: New address

        Raises:
            NotLoggedInError: If the client has no session
            BadRequestError: If the API rejects the address
        """
        response = self._authed_request(
            "PATCH",
            CURRENT_USER_PATH,
            json={"address": address.to_dict()},
        )
        self._check(response, parse_bad_request=True)

    # Internals

    def _require_session(self) -> Session:
        if self._session is None:
            raise NotLoggedInError()
        return self._session

    def _authed_request(self, method: str, path: str, **kwargs) -> httpx.Response:
        session = self._require_session()
        return self._request(
            method,
            path,
            headers={"Accept": "application/json"},
            auth=session.basic_auth(),
            **kwargs,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RequestFailedError() from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def _check(self, response: httpx.Response, parse_bad_request: bool = False):
        """Map a non-2xx response to an ApiError."""
        if response.is_success:
            return

        status = response.status_code
        logger.warning("%s %s returned %s", response.request.method, response.request.url.path, status)

        if status == httpx.codes.UNAUTHORIZED:
            raise UnauthorizedError()
        if parse_bad_request and status == httpx.codes.BAD_REQUEST:
            body = self._parse(response, lambda data: (data["code"], data["message"]))
            raise BadRequestError(code=body[0], message=body[1])
        raise UnexpectedStatusError(status)

    @staticmethod
    def _parse(response: httpx.Response, build):
        """Decode JSON and build a result, mapping failures to ParseResponseError."""
        try:
            return build(response.json())
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not parse response from %s: %s", response.request.url.path, exc)
            raise ParseResponseError() from exc
