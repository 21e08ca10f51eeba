"""Pydantic DTOs for invoices."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel
from clientportal.domain.records import InvoiceStatus


class InvoiceCreate(CamelModel):
    amount: float = Field(..., gt=0, examples=[2499])


class InvoiceStatusUpdate(CamelModel):
    status: InvoiceStatus


class InvoiceResponse(CamelModel):
    id: str
    client_id: str
    amount: float
    status: InvoiceStatus
    pdf_url: str = Field(..., alias="pdf_url")
    issued_at: int


class InvoiceWithClientInfoResponse(InvoiceResponse):
    client_name: str
    client_company: str
