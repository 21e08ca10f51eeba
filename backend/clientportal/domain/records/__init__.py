from .base import Record, epoch_millis
from .user import User, UserRole
from .client import Client, ClientStatus
from .project import Milestone, MilestoneStatus, Project
from .invoice import Invoice, InvoiceStatus
from .message import Message
from .website_content import DEFAULT_WEBSITE_CONTENT, WEBSITE_CONTENT_ID, WebsiteContent

__all__ = [
    "Record",
    "epoch_millis",
    "User",
    "UserRole",
    "Client",
    "ClientStatus",
    "Project",
    "Milestone",
    "MilestoneStatus",
    "Invoice",
    "InvoiceStatus",
    "Message",
    "DEFAULT_WEBSITE_CONTENT",
    "WEBSITE_CONTENT_ID",
    "WebsiteContent",
]
