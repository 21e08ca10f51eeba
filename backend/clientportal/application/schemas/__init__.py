from .common import ApiErrorResponse, ApiResponse, CamelModel, StatusMessage
from .client import (
    ChangePasswordRequest,
    ClientProfileResponse,
    ClientResponse,
    ClientUpdate,
    ClientWithUserResponse,
    UpdateClientProfileRequest,
    UserResponse,
)
from .auth import (
    ClientRegistrationRequest,
    ClientRegistrationResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
    RegisteredUser,
)
from .project import (
    MilestoneCreate,
    MilestoneResponse,
    MilestoneUpdate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    ProjectWithMilestonesResponse,
)
from .invoice import (
    InvoiceCreate,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceWithClientInfoResponse,
)
from .chat import MessageCreate, MessageResponse, MessageWithSenderResponse, SenderInfo
from .content import WebsiteContentSchema

__all__ = [
    "ApiErrorResponse",
    "ApiResponse",
    "CamelModel",
    "StatusMessage",
    "ChangePasswordRequest",
    "ClientProfileResponse",
    "ClientResponse",
    "ClientUpdate",
    "ClientWithUserResponse",
    "UpdateClientProfileRequest",
    "UserResponse",
    "ClientRegistrationRequest",
    "ClientRegistrationResponse",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "RegisteredUser",
    "MilestoneCreate",
    "MilestoneResponse",
    "MilestoneUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "ProjectWithMilestonesResponse",
    "InvoiceCreate",
    "InvoiceResponse",
    "InvoiceStatusUpdate",
    "InvoiceWithClientInfoResponse",
    "MessageCreate",
    "MessageResponse",
    "MessageWithSenderResponse",
    "SenderInfo",
    "WebsiteContentSchema",
]
