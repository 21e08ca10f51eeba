"""Website content endpoints — public read, admin replace."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import ApiResponse, StatusMessage, WebsiteContentSchema
from clientportal.application.services import ContentService
from clientportal.infrastructure.dependencies import get_content_service

router = APIRouter(prefix="/content", tags=["Content"])


@router.get("", response_model=ApiResponse[WebsiteContentSchema])
async def get_content(
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[WebsiteContentSchema]:
    content = await service.get_content()
    return ApiResponse(data=WebsiteContentSchema.model_validate(content))


@router.put("", response_model=ApiResponse[StatusMessage])
async def replace_content(
    data: WebsiteContentSchema,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[StatusMessage]:
    await service.replace_content(data)
    return ApiResponse(data=StatusMessage(message="Content updated successfully"))
