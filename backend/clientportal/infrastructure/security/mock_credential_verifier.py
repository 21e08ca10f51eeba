"""Mock password hashing with the ``hashed_<password>`` scheme.

Unsalted and reversible by inspection. Swap in a bcrypt/argon2 adapter
implementing ``CredentialVerifier`` for anything real.
"""

from clientportal.application.interfaces import CredentialVerifier

_PREFIX = "hashed_"


class MockCredentialVerifier(CredentialVerifier):
    """Infrastructure adapter for the mock hashing scheme."""

    async def hash(self, password: str) -> str:
        return f"{_PREFIX}{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == await self.hash(password)
