from .auth_service import AuthService, AuthSession
from .client_service import ClientService, generate_password
from .project_service import ProjectService
from .invoice_service import InvoiceService, InvoiceWithClientInfo
from .chat_service import ChatService
from .content_service import ContentService

__all__ = [
    "AuthService",
    "AuthSession",
    "ClientService",
    "generate_password",
    "ProjectService",
    "InvoiceService",
    "InvoiceWithClientInfo",
    "ChatService",
    "ContentService",
]
