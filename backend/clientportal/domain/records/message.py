"""Chat message record.

``client_id`` names the conversation; every client has exactly one thread
with the agency admin.
"""

from dataclasses import dataclass, field

from clientportal.domain.records.base import Record


@dataclass
class Message(Record):
    client_id: str = ""
    sender_id: str = ""
    receiver_id: str = ""
    content: str = ""
    attachments: list[str] = field(default_factory=list)
    created_at: int = 0
