"""Application service for mock authentication.

Admin login checks static credentials from settings; client login checks
the stored hash through the ``CredentialVerifier`` port. Tokens are opaque
placeholders, not signed.
"""

import logging
from dataclasses import dataclass

from clientportal.application.interfaces import CredentialVerifier, RecordStore
from clientportal.application.persistence import UserEntity
from clientportal.config import Settings
from clientportal.domain.exceptions import AuthenticationError
from clientportal.domain.records import User, UserRole

logger = logging.getLogger(__name__)


@dataclass
class AuthSession:
    """Outcome of a successful login."""

    user: User
    token: str


class AuthService:
    """Orchestrates admin and client login."""

    def __init__(self, store: RecordStore, verifier: CredentialVerifier, settings: Settings):
        self._store = store
        self._verifier = verifier
        self._settings = settings

    async def ensure_admin_user(self) -> User:
        """Return the admin user, creating (or re-indexing) it on first use."""
        admin = User(
            id=self._settings.admin_user_id,
            email=self._settings.admin_email,
            name=self._settings.admin_name,
            role=UserRole.ADMIN,
            password_hash=await self._verifier.hash(self._settings.admin_password),
        )
        entity = await UserEntity.ensure_exists(self._store, admin.id, default=admin)
        return await entity.get_state()

    async def admin_login(self, email: str, password: str) -> AuthSession:
        if email != self._settings.admin_email or password != self._settings.admin_password:
            logger.info("Rejected admin login for '%s'", email)
            raise AuthenticationError("Invalid credentials")
        admin = await self.ensure_admin_user()
        return AuthSession(user=admin, token="mock-jwt-token-for-admin")

    async def client_login(self, email: str, password: str) -> AuthSession:
        users = (await UserEntity.list_all(self._store)).items
        user = next((u for u in users if u.email == email), None)
        if user is None:
            raise AuthenticationError("User not found")
        if not await self._verifier.verify(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")
        if user.role != UserRole.CLIENT:
            raise AuthenticationError("Access denied", forbidden=True)
        return AuthSession(user=user, token=f"mock-jwt-token-for-client-{user.id}")
