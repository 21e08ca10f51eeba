"""Client record — the agency's customer; shares its id with the owning User."""

from dataclasses import dataclass
from enum import Enum

from clientportal.domain.records.base import Record


class ClientStatus(str, Enum):
    """Where the engagement with a client stands."""

    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Client(Record):
    user_id: str = ""
    company: str = ""
    project_type: str = ""
    portal_url: str = "/portal/:clientId"
    status: ClientStatus = ClientStatus.PENDING
    created_at: int = 0  # epoch millis

    def __post_init__(self) -> None:
        self.status = ClientStatus(self.status)
