"""Admin client management endpoints."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    ClientResponse,
    ClientUpdate,
    ClientWithUserResponse,
    StatusMessage,
    UserResponse,
)
from clientportal.application.services import ClientService
from clientportal.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/admin/clients", tags=["Clients"])


@router.get("", response_model=ApiResponse[list[ClientWithUserResponse]])
async def list_clients(
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[list[ClientWithUserResponse]]:
    """All clients, each with its user account."""
    pairs = await service.list_clients_with_users()
    return ApiResponse(
        data=[
            ClientWithUserResponse.model_validate(
                {
                    **client.to_dict(),
                    "user": UserResponse.model_validate(user) if user else None,
                }
            )
            for client, user in pairs
        ]
    )


@router.put("/{client_id}", response_model=ApiResponse[ClientResponse])
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    """Update a client's company, project type or status."""
    client = await service.update_client(client_id, data)
    return ApiResponse(data=ClientResponse.model_validate(client))


@router.delete("/{client_id}", response_model=ApiResponse[StatusMessage])
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[StatusMessage]:
    """Delete a client with its projects, milestones, invoices and messages."""
    await service.delete_client(client_id)
    return ApiResponse(data=StatusMessage(message="Client and all associated data deleted"))
