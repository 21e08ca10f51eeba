"""Application service (use case) for client onboarding, accounts and removal."""

import logging
import secrets
import string
import uuid

from clientportal.application.interfaces import CredentialVerifier, RecordStore
from clientportal.application.persistence import (
    ClientEntity,
    InvoiceEntity,
    MessageEntity,
    MilestoneEntity,
    ProjectEntity,
    UserEntity,
)
from clientportal.application.schemas import (
    ChangePasswordRequest,
    ClientRegistrationRequest,
    ClientUpdate,
    UpdateClientProfileRequest,
)
from clientportal.config import Settings
from clientportal.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from clientportal.domain.records import Client, ClientStatus, User, UserRole, epoch_millis
from clientportal.infrastructure.logging.colored_logger import CascadeLogger, CascadeStage

logger = logging.getLogger(__name__)

_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def generate_password(length: int = 10) -> str:
    """Random alphanumeric password handed to a newly registered client."""
    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))


class ClientService:
    """Orchestrates client lifecycle. A client shares its id with its user."""

    def __init__(self, store: RecordStore, verifier: CredentialVerifier, settings: Settings):
        self._store = store
        self._verifier = verifier
        self._settings = settings

    async def register(self, data: ClientRegistrationRequest) -> tuple[Client, User, str]:
        """Create the user and client records; returns the plaintext password once."""
        users = (await UserEntity.list_all(self._store)).items
        if any(u.email == data.email for u in users):
            raise DuplicateEntityError("User", "email", data.email)

        user_id = str(uuid.uuid4())
        password = generate_password(self._settings.generated_password_length)
        user = User(
            id=user_id,
            email=data.email,
            name=data.name,
            role=UserRole.CLIENT,
            password_hash=await self._verifier.hash(password),
            avatar_url=f"{self._settings.avatar_base_url}{user_id}",
        )
        await UserEntity.create(self._store, user)

        client = Client(
            id=user_id,
            user_id=user_id,
            company=data.company,
            project_type=data.project_type,
            status=ClientStatus.PENDING,
            created_at=epoch_millis(),
        )
        await ClientEntity.create(self._store, client)
        logger.info("Registered client '%s' (%s)", client.id, client.company)
        return client, user, password

    async def list_clients_with_users(self) -> list[tuple[Client, User | None]]:
        clients = (await ClientEntity.list_all(self._store)).items
        users_by_id = {u.id: u for u in (await UserEntity.list_all(self._store)).items}
        return [(client, users_by_id.get(client.user_id)) for client in clients]

    async def get_client(self, client_id: str) -> Client:
        entity = ClientEntity(self._store, client_id)
        if not await entity.exists():
            raise EntityNotFoundError("Client", client_id)
        return await entity.get_state()

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        entity = ClientEntity(self._store, client_id)
        if not await entity.exists():
            raise EntityNotFoundError("Client", client_id)
        updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        return await entity.patch(updates)

    # ── Client's own account ─────────────────────────────────────────

    async def _account_entities(self, client_id: str) -> tuple[UserEntity, ClientEntity]:
        user_entity = UserEntity(self._store, client_id)
        client_entity = ClientEntity(self._store, client_id)
        if not await user_entity.exists() or not await client_entity.exists():
            raise EntityNotFoundError("Client", client_id, "Client account not found")
        return user_entity, client_entity

    async def get_profile(self, client_id: str) -> tuple[User, Client]:
        user_entity, client_entity = await self._account_entities(client_id)
        return await user_entity.get_state(), await client_entity.get_state()

    async def update_profile(self, client_id: str, data: UpdateClientProfileRequest) -> None:
        user_entity, client_entity = await self._account_entities(client_id)
        user_updates: dict[str, str] = {"name": data.name}
        if data.avatar_url is not None:
            user_updates["avatar_url"] = data.avatar_url
        await user_entity.patch(user_updates)
        await client_entity.patch({"company": data.company})

    async def change_password(self, client_id: str, data: ChangePasswordRequest) -> None:
        user_entity = UserEntity(self._store, client_id)
        if not await user_entity.exists():
            raise EntityNotFoundError("User", client_id, "User not found")
        user = await user_entity.get_state()
        if not await self._verifier.verify(data.current_password, user.password_hash):
            raise AuthenticationError("Current password does not match")
        await user_entity.patch({"password_hash": await self._verifier.hash(data.new_password)})

    # ── Removal ──────────────────────────────────────────────────────

    async def delete_client(self, client_id: str) -> None:
        """Delete a client and everything hanging off it.

        Runs as independent deletes in order: projects (each after its
        milestones), invoices, messages, then the client and its user. There
        is no surrounding transaction; a failure leaves the earlier stages
        deleted and is logged with the stage that broke.
        """
        log = CascadeLogger()

        projects = [
            p for p in (await ProjectEntity.list_all(self._store)).items if p.client_id == client_id
        ]
        milestones = (await MilestoneEntity.list_all(self._store)).items
        with log.timed_step(CascadeStage.PROJECTS, "Deleting projects", client_id=client_id):
            for project in projects:
                milestone_ids = [m.id for m in milestones if m.project_id == project.id]
                removed = await MilestoneEntity.delete_many(self._store, milestone_ids)
                log.count(CascadeStage.MILESTONES, removed)
                await ProjectEntity.remove(self._store, project.id)
            log.count(CascadeStage.PROJECTS, len(projects))

        with log.timed_step(CascadeStage.INVOICES, "Deleting invoices", client_id=client_id):
            invoice_ids = [
                i.id for i in (await InvoiceEntity.list_all(self._store)).items if i.client_id == client_id
            ]
            log.count(CascadeStage.INVOICES, await InvoiceEntity.delete_many(self._store, invoice_ids))

        with log.timed_step(CascadeStage.MESSAGES, "Deleting messages", client_id=client_id):
            message_ids = [
                m.id for m in (await MessageEntity.list_all(self._store)).items if m.client_id == client_id
            ]
            log.count(CascadeStage.MESSAGES, await MessageEntity.delete_many(self._store, message_ids))

        with log.timed_step(CascadeStage.ACCOUNT, "Deleting client and user", client_id=client_id):
            client_deleted = await ClientEntity.remove(self._store, client_id)
            # Only a client's own account goes; an admin id is not a client.
            if client_deleted:
                await UserEntity.remove(self._store, client_id)

        if not client_deleted:
            raise EntityNotFoundError("Client", client_id, "Client not found")
        log.step_complete(CascadeStage.CASCADE, "Client and all associated data deleted", client_id=client_id)
