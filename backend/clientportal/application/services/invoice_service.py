"""Application service (use case) for invoices."""

import uuid
from dataclasses import dataclass

from clientportal.application.interfaces import RecordStore
from clientportal.application.persistence import ClientEntity, InvoiceEntity, UserEntity
from clientportal.application.schemas import InvoiceCreate
from clientportal.domain.exceptions import EntityNotFoundError
from clientportal.domain.records import Invoice, InvoiceStatus, epoch_millis

UNKNOWN = "N/A"


@dataclass
class InvoiceWithClientInfo:
    invoice: Invoice
    client_name: str
    client_company: str


class InvoiceService:
    """Orchestrates invoice logic. PDFs are mock URLs; nothing is rendered."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def list_with_client_info(self) -> list[InvoiceWithClientInfo]:
        invoices = (await InvoiceEntity.list_all(self._store)).items
        clients_by_id = {c.id: c for c in (await ClientEntity.list_all(self._store)).items}
        users_by_id = {u.id: u for u in (await UserEntity.list_all(self._store)).items}

        result = []
        for invoice in invoices:
            client = clients_by_id.get(invoice.client_id)
            user = users_by_id.get(client.user_id) if client else None
            result.append(
                InvoiceWithClientInfo(
                    invoice=invoice,
                    client_name=(user.name if user else "") or UNKNOWN,
                    client_company=(client.company if client else "") or UNKNOWN,
                )
            )
        return result

    async def list_client_invoices(self, client_id: str) -> list[Invoice]:
        invoices = (await InvoiceEntity.list_all(self._store)).items
        return [i for i in invoices if i.client_id == client_id]

    async def create_invoice(self, client_id: str, data: InvoiceCreate) -> Invoice:
        invoice = Invoice(
            id=str(uuid.uuid4()),
            client_id=client_id,
            amount=data.amount,
            status=InvoiceStatus.PENDING,
            pdf_url=f"/mock-invoice-{uuid.uuid4()}.pdf",
            issued_at=epoch_millis(),
        )
        return await InvoiceEntity.create(self._store, invoice)

    async def update_status(self, invoice_id: str, status: InvoiceStatus) -> Invoice:
        entity = InvoiceEntity(self._store, invoice_id)
        if not await entity.exists():
            raise EntityNotFoundError("Invoice", invoice_id)
        return await entity.patch({"status": status})

    async def delete_invoice(self, invoice_id: str) -> None:
        if not await InvoiceEntity.remove(self._store, invoice_id):
            raise EntityNotFoundError("Invoice", invoice_id)
