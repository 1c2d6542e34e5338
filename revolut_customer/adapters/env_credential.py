"""
Environment Variable Credential Adapter - Simple env-based credential storage.

WARNING: For development only. Values live in the process environment,
unencrypted, and vanish when the process exits.
"""

import os
from typing import Optional

from revolut_customer.ports.credential_port import CredentialPort


class EnvCredentialAdapter(CredentialPort):
    """
    Environment variable-based credential storage.

    With the default prefix a session is read from REVOLUT_USER_ID and
    REVOLUT_ACCESS_TOKEN.
    """

    def __init__(self, prefix: str = "REVOLUT_"):
        """
        Initialize env credential adapter.

        Args:
            prefix: Prefix for environment variables (default REVOLUT_)
        """
        self._prefix = prefix

    def _env_key(self, key: str) -> str:
        """Convert credential key to env var name."""
        return f"{self._prefix}{key.upper()}"

    def store(self, key: str, value: str) -> None:
        """Store a credential in the environment."""
        os.environ[self._env_key(key)] = value

    def retrieve(self, key: str) -> Optional[str]:
        """Retrieve a credential from the environment."""
        return os.environ.get(self._env_key(key))

    def delete(self, key: str) -> bool:
        """Delete a credential from the environment."""
        env_key = self._env_key(key)

        if env_key not in os.environ:
            return False

        del os.environ[env_key]
        return True

    def list_keys(self, prefix: Optional[str] = None) -> list[str]:
        """List credential keys, optionally filtered by prefix."""
        keys = []
        search_prefix = self._env_key(prefix) if prefix else self._prefix

        for env_key in os.environ:
            if env_key.startswith(search_prefix):
                # Strip prefix to get original key
                keys.append(env_key[len(self._prefix):].lower())

        return keys
