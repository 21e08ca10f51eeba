"""User record — admins and client contacts share one shape."""

from dataclasses import dataclass
from enum import Enum

from clientportal.domain.records.base import Record


class UserRole(str, Enum):
    """Who a user is to the agency."""

    ADMIN = "admin"
    CLIENT = "client"


@dataclass
class User(Record):
    email: str = ""
    name: str = ""
    role: UserRole = UserRole.CLIENT
    password_hash: str = ""
    avatar_url: str = ""

    def __post_init__(self) -> None:
        self.role = UserRole(self.role)
