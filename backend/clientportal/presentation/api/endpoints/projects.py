"""Admin project and milestone endpoints."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    MilestoneCreate,
    MilestoneResponse,
    MilestoneUpdate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    StatusMessage,
)
from clientportal.application.services import ProjectService
from clientportal.infrastructure.dependencies import get_project_service

router = APIRouter(prefix="/admin", tags=["Projects"])


@router.get("/clients/{client_id}/projects", response_model=ApiResponse[list[ProjectResponse]])
async def list_client_projects(
    client_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[list[ProjectResponse]]:
    projects = await service.list_client_projects(client_id)
    return ApiResponse(data=[ProjectResponse.model_validate(p) for p in projects])


@router.post("/clients/{client_id}/projects", response_model=ApiResponse[ProjectResponse])
async def create_project(
    client_id: str,
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectResponse]:
    project = await service.create_project(client_id, data)
    return ApiResponse(data=ProjectResponse.model_validate(project))


@router.put("/projects/{project_id}", response_model=ApiResponse[ProjectResponse])
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectResponse]:
    """Apply a partial update to a project."""
    project = await service.update_project(project_id, data)
    return ApiResponse(data=ProjectResponse.model_validate(project))


@router.delete("/projects/{project_id}", response_model=ApiResponse[StatusMessage])
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[StatusMessage]:
    await service.delete_project(project_id)
    return ApiResponse(data=StatusMessage(message="Project and its milestones deleted"))


@router.post("/projects/{project_id}/milestones", response_model=ApiResponse[MilestoneResponse])
async def create_milestone(
    project_id: str,
    data: MilestoneCreate,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[MilestoneResponse]:
    milestone = await service.create_milestone(project_id, data)
    return ApiResponse(data=MilestoneResponse.model_validate(milestone))


@router.put("/milestones/{milestone_id}", response_model=ApiResponse[MilestoneResponse])
async def update_milestone(
    milestone_id: str,
    data: MilestoneUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[MilestoneResponse]:
    milestone = await service.update_milestone(milestone_id, data)
    return ApiResponse(data=MilestoneResponse.model_validate(milestone))


@router.delete("/milestones/{milestone_id}", response_model=ApiResponse[StatusMessage])
async def delete_milestone(
    milestone_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[StatusMessage]:
    await service.delete_milestone(milestone_id)
    return ApiResponse(data=StatusMessage(message="Milestone deleted"))
