"""
Ports - Interfaces the client depends on.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from revolut_customer.ports.credential_port import CredentialPort

__all__ = [
    "CredentialPort",
]
