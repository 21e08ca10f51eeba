"""Client portal endpoints — a client's own projects, invoices and account."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    ChangePasswordRequest,
    ClientProfileResponse,
    InvoiceResponse,
    MilestoneResponse,
    ProjectWithMilestonesResponse,
    StatusMessage,
    UpdateClientProfileRequest,
)
from clientportal.application.services import ClientService, InvoiceService, ProjectService
from clientportal.infrastructure.dependencies import (
    get_client_service,
    get_invoice_service,
    get_project_service,
)

router = APIRouter(prefix="/portal/{client_id}", tags=["Portal"])


@router.get("/projects", response_model=ApiResponse[list[ProjectWithMilestonesResponse]])
async def list_projects(
    client_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[list[ProjectWithMilestonesResponse]]:
    """The client's projects, each with its milestones ordered by due date."""
    rows = await service.list_projects_with_milestones(client_id)
    return ApiResponse(
        data=[
            ProjectWithMilestonesResponse.model_validate(
                {
                    **project.to_dict(),
                    "milestones": [MilestoneResponse.model_validate(m) for m in milestones],
                }
            )
            for project, milestones in rows
        ]
    )


@router.get("/invoices", response_model=ApiResponse[list[InvoiceResponse]])
async def list_invoices(
    client_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> ApiResponse[list[InvoiceResponse]]:
    invoices = await service.list_client_invoices(client_id)
    return ApiResponse(data=[InvoiceResponse.model_validate(i) for i in invoices])


@router.get("/account", response_model=ApiResponse[ClientProfileResponse])
async def get_account(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientProfileResponse]:
    user, client = await service.get_profile(client_id)
    return ApiResponse(
        data=ClientProfileResponse(
            name=user.name,
            email=user.email,
            company=client.company,
            avatar_url=user.avatar_url or None,
        )
    )


@router.put("/account", response_model=ApiResponse[StatusMessage])
async def update_account(
    client_id: str,
    data: UpdateClientProfileRequest,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[StatusMessage]:
    await service.update_profile(client_id, data)
    return ApiResponse(data=StatusMessage(message="Profile updated successfully"))


@router.post("/change-password", response_model=ApiResponse[StatusMessage])
async def change_password(
    client_id: str,
    data: ChangePasswordRequest,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[StatusMessage]:
    await service.change_password(client_id, data)
    return ApiResponse(data=StatusMessage(message="Password changed successfully"))
