"""Admin invoice endpoints."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    InvoiceCreate,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceWithClientInfoResponse,
    StatusMessage,
)
from clientportal.application.services import InvoiceService
from clientportal.infrastructure.dependencies import get_invoice_service

router = APIRouter(prefix="/admin", tags=["Invoices"])


@router.get("/invoices", response_model=ApiResponse[list[InvoiceWithClientInfoResponse]])
async def list_invoices(
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse[list[InvoiceWithClientInfoResponse]]:
    """All invoices with the client's name and company attached."""
    rows = await service.list_with_client_info()
    return ApiResponse(
        data=[
            InvoiceWithClientInfoResponse.model_validate(
                {
                    **row.invoice.to_dict(),
                    "client_name": row.client_name,
                    "client_company": row.client_company,
                }
            )
            for row in rows
        ]
    )


@router.post("/clients/{client_id}/invoices", response_model=ApiResponse[InvoiceResponse])
async def create_invoice(
    client_id: str,
    data: InvoiceCreate,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse[InvoiceResponse]:
    invoice = await service.create_invoice(client_id, data)
    return ApiResponse(data=InvoiceResponse.model_validate(invoice))


@router.put("/invoices/{invoice_id}", response_model=ApiResponse[InvoiceResponse])
async def update_invoice_status(
    invoice_id: str,
    data: InvoiceStatusUpdate,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse[InvoiceResponse]:
    """Mark an invoice pending or paid."""
    invoice = await service.update_status(invoice_id, data.status)
    return ApiResponse(data=InvoiceResponse.model_validate(invoice))


@router.delete("/invoices/{invoice_id}", response_model=ApiResponse[StatusMessage])
async def delete_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse[StatusMessage]:
    await service.delete_invoice(invoice_id)
    return ApiResponse(data=StatusMessage(message="Invoice deleted"))
