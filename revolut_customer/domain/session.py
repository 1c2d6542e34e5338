"""
Session Domain Model - Credentials of a signed-in user.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from uuid import UUID

from revolut_customer.domain.user import User
from revolut_customer.domain.wallet import Wallet


def is_valid_user_id(user_id: str) -> bool:
    """Check that a user ID is a UUID."""
    try:
        UUID(user_id)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


@dataclass
class Session:
    """
    Session entity - the pair used for HTTP Basic authentication.

    Domain rules:
    - user_id is a UUID string
    - access_token is opaque and never shown in repr()
    - There is no expiry or refresh; a rejected token means signing in again
    """
    user_id: str
    access_token: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def basic_auth(self) -> tuple:
        """(username, password) for HTTP Basic auth."""
        return (self.user_id, self.access_token)

    def to_dict(self, include_token: bool = False) -> Dict[str, Any]:
        """
        Serialize to dict.

        Args:
            include_token: If True, includes the access token

        Returns:
            Dict representation
        """
        data = {
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
        }
        if include_token:
            data["access_token"] = self.access_token
        return data


@dataclass
class SignInResponse:
    """
    Result of a confirmed sign-in.

    The wire format is {"user": {...}, "wallet": {...}, "accessToken": "..."}.
    """
    user: User
    wallet: Wallet
    access_token: str = field(repr=False)

    @property
    def session(self) -> Session:
        return Session(user_id=self.user.id, access_token=self.access_token)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignInResponse":
        """Deserialize from the API's JSON layout."""
        token: Optional[str] = data["accessToken"]
        if not isinstance(token, str) or not token:
            raise ValueError("accessToken must be a non-empty string")
        return cls(
            user=User.from_dict(data["user"]),
            wallet=Wallet.from_dict(data["wallet"]),
            access_token=token,
        )
