"""Abstract interface (port) for password hashing and verification."""

from abc import ABC, abstractmethod


class CredentialVerifier(ABC):
    """Port for turning passwords into stored hashes and checking them."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Return the hash to persist for ``password``."""
        ...

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash."""
        ...
