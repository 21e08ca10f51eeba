"""Pydantic DTOs for the client ↔ admin conversation."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel
from clientportal.domain.records import UserRole


class MessageCreate(CamelModel):
    sender_id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class MessageResponse(CamelModel):
    id: str
    client_id: str
    sender_id: str
    receiver_id: str
    content: str
    attachments: list[str]
    created_at: int


class SenderInfo(CamelModel):
    name: str
    role: UserRole


class MessageWithSenderResponse(MessageResponse):
    sender: SenderInfo
