"""Pydantic DTOs for login and client registration."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel
from clientportal.application.schemas.client import ClientResponse
from clientportal.domain.records import UserRole


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, examples=["client@example.com"])
    password: str = Field(..., min_length=1)


class LoginUser(CamelModel):
    id: str
    email: str
    name: str
    role: UserRole
    avatar_url: str | None = None


class LoginResponse(CamelModel):
    user: LoginUser
    token: str


class ClientRegistrationRequest(CamelModel):
    """Lead sign-up from the public site — every field is required."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Jane Doe"])
    email: str = Field(..., min_length=3, max_length=255, examples=["jane@acme.test"])
    company: str = Field(..., min_length=1, max_length=255, examples=["Acme"])
    project_type: str = Field(..., min_length=1, max_length=255, examples=["CRM"])


class RegisteredUser(CamelModel):
    id: str
    email: str
    name: str


class ClientRegistrationResponse(CamelModel):
    """Returned once, at registration; the plaintext password is never stored."""

    client: ClientResponse
    user: RegisteredUser
    password_plaintext: str = Field(..., alias="password_plaintext")
