"""
Memory Credential Adapter - In-memory credential storage (testing only).
"""

from typing import Dict, Optional

from revolut_customer.ports.credential_port import CredentialPort


class MemoryCredentialAdapter(CredentialPort):
    """
    In-memory credential storage.

    WARNING: Only for testing. Credentials are lost on restart.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def store(self, key: str, value: str) -> None:
        self._values[key] = value

    def retrieve(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def delete(self, key: str) -> bool:
        if key not in self._values:
            return False
        del self._values[key]
        return True

    def list_keys(self, prefix: Optional[str] = None) -> list[str]:
        return [key for key in self._values if not prefix or key.startswith(prefix)]
