"""Pydantic DTOs for clients, users and the client's own account."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel
from clientportal.domain.records import ClientStatus, UserRole


class UserResponse(CamelModel):
    """Public view of a user — the password hash is never exposed."""

    id: str
    email: str
    name: str
    role: UserRole
    avatar_url: str = ""


class ClientResponse(CamelModel):
    id: str
    user_id: str
    company: str
    project_type: str
    portal_url: str
    status: ClientStatus
    created_at: int


class ClientWithUserResponse(ClientResponse):
    user: UserResponse | None = None


class ClientUpdate(CamelModel):
    """Admin edit of a client — all fields optional."""

    company: str | None = Field(None, min_length=1, max_length=255)
    project_type: str | None = Field(None, min_length=1, max_length=255)
    status: ClientStatus | None = None


class ClientProfileResponse(CamelModel):
    name: str
    email: str
    company: str
    avatar_url: str | None = None


class UpdateClientProfileRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    avatar_url: str | None = None


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)
