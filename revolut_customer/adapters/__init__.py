"""
Adapters - Implementations of ports.

Credential Storage:
- EnvCredentialAdapter: Environment variable credentials
- MemoryCredentialAdapter: In-memory credentials (testing)
"""

from revolut_customer.adapters.env_credential import EnvCredentialAdapter
from revolut_customer.adapters.memory_credential import MemoryCredentialAdapter

__all__ = [
    "EnvCredentialAdapter",
    "MemoryCredentialAdapter",
]
