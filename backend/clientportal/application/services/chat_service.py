"""Application service for the per-client conversation with the agency admin.

Clients poll ``get_conversation``; there is no push transport.
"""

import uuid

from clientportal.application.interfaces import RecordStore
from clientportal.application.persistence import ClientEntity, MessageEntity, UserEntity
from clientportal.application.schemas import MessageCreate
from clientportal.application.services.auth_service import AuthService
from clientportal.domain.exceptions import DomainValidationError, EntityNotFoundError
from clientportal.domain.records import Message, User, UserRole, epoch_millis


class ChatService:
    """Orchestrates reading, posting and clearing chat messages."""

    def __init__(self, store: RecordStore, auth_service: AuthService):
        self._store = store
        self._auth = auth_service

    async def _conversation(self, client_id: str) -> list[Message]:
        messages = (await MessageEntity.list_all(self._store)).items
        return [m for m in messages if m.client_id == client_id]

    async def get_conversation(self, client_id: str) -> list[tuple[Message, User | None]]:
        """Messages oldest first, each paired with its sender (None if unknown)."""
        messages = await self._conversation(client_id)
        users_by_id = {u.id: u for u in (await UserEntity.list_all(self._store)).items}
        admin = await self._auth.ensure_admin_user()
        users_by_id.setdefault(admin.id, admin)
        return [
            (message, users_by_id.get(message.sender_id))
            for message in sorted(messages, key=lambda m: m.created_at)
        ]

    async def send_message(self, client_id: str, data: MessageCreate) -> Message:
        """Post a message; the receiver is the client if an admin sent it, else the admin."""
        if not await ClientEntity(self._store, client_id).exists():
            raise EntityNotFoundError("Client", client_id, "Client not found")
        users = (await UserEntity.list_all(self._store)).items
        admin = next((u for u in users if u.role == UserRole.ADMIN), None)
        if admin is None:
            raise DomainValidationError("Admin user not configured")
        sender = next((u for u in users if u.id == data.sender_id), None)
        if sender is None:
            raise EntityNotFoundError("User", data.sender_id, "Sender not found")

        message = Message(
            id=str(uuid.uuid4()),
            client_id=client_id,
            sender_id=sender.id,
            receiver_id=client_id if sender.role == UserRole.ADMIN else admin.id,
            content=data.content,
            attachments=[],
            created_at=epoch_millis(),
        )
        return await MessageEntity.create(self._store, message)

    async def clear_conversation(self, client_id: str) -> int:
        ids = [m.id for m in await self._conversation(client_id)]
        return await MessageEntity.delete_many(self._store, ids)
