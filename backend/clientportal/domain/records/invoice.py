"""Invoice record."""

from dataclasses import dataclass
from enum import Enum

from clientportal.domain.records.base import Record


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


@dataclass
class Invoice(Record):
    client_id: str = ""
    amount: float = 0
    status: InvoiceStatus = InvoiceStatus.PENDING
    pdf_url: str = ""
    issued_at: int = 0

    def __post_init__(self) -> None:
        self.status = InvoiceStatus(self.status)
