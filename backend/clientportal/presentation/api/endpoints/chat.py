"""Client ↔ admin chat endpoints (polled by the frontend)."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    MessageCreate,
    MessageResponse,
    MessageWithSenderResponse,
    StatusMessage,
)
from clientportal.application.services import ChatService
from clientportal.domain.records import UserRole
from clientportal.infrastructure.dependencies import get_chat_service

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/{client_id}", response_model=ApiResponse[list[MessageWithSenderResponse]])
async def get_conversation(
    client_id: str,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse[list[MessageWithSenderResponse]]:
    """Conversation for a client, oldest message first."""
    pairs = await service.get_conversation(client_id)
    return ApiResponse(
        data=[
            MessageWithSenderResponse.model_validate(
                {
                    **message.to_dict(),
                    "sender": {
                        "name": sender.name if sender else "Unknown",
                        "role": sender.role if sender else UserRole.CLIENT,
                    },
                }
            )
            for message, sender in pairs
        ]
    )


@router.post("/{client_id}", response_model=ApiResponse[MessageResponse])
async def send_message(
    client_id: str,
    data: MessageCreate,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse[MessageResponse]:
    message = await service.send_message(client_id, data)
    return ApiResponse(data=MessageResponse.model_validate(message))


@router.delete("/{client_id}", response_model=ApiResponse[StatusMessage])
async def clear_conversation(
    client_id: str,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse[StatusMessage]:
    deleted = await service.clear_conversation(client_id)
    return ApiResponse(data=StatusMessage(message=f"{deleted} messages deleted"))
