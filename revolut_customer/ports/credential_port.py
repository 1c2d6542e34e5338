"""
Credential Port - Interface for keeping session credentials between runs.

Implementations:
- EnvCredentialAdapter: Environment variables (dev only)
- MemoryCredentialAdapter: In-memory store (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional

from revolut_customer.domain.session import Session

USER_ID_KEY = "user_id"
ACCESS_TOKEN_KEY = "access_token"


class CredentialPort(ABC):
    """Port: Credential storage and retrieval."""

    @abstractmethod
    def store(self, key: str, value: str) -> None:
        """
        Store a credential.

        Args:
            key: Credential identifier (e.g., "access_token")
            value: Credential value
        """
        pass

    @abstractmethod
    def retrieve(self, key: str) -> Optional[str]:
        """
        Retrieve a credential value.

        Args:
            key: Credential identifier

        Returns:
            Credential value, or None if not found
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete a credential.

        Args:
            key: Credential identifier

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def list_keys(self, prefix: Optional[str] = None) -> list[str]:
        """
        List credential keys (not values).

        Args:
            prefix: Optional prefix filter

        Returns:
            List of credential keys
        """
        pass

    def load_session(self) -> Optional[Session]:
        """
        Load a stored session.

        Returns:
            Session if both user ID and access token are stored, None otherwise
        """
        user_id = self.retrieve(USER_ID_KEY)
        access_token = self.retrieve(ACCESS_TOKEN_KEY)
        if not user_id or not access_token:
            return None
        return Session(user_id=user_id, access_token=access_token)

    def save_session(self, session: Session) -> None:
        """Store both halves of a session."""
        self.store(USER_ID_KEY, session.user_id)
        self.store(ACCESS_TOKEN_KEY, session.access_token)

    def clear_session(self) -> bool:
        """
        Delete a stored session.

        Returns:
            True if anything was deleted
        """
        deleted_user = self.delete(USER_ID_KEY)
        deleted_token = self.delete(ACCESS_TOKEN_KEY)
        return deleted_user or deleted_token
