"""Pydantic DTOs for projects and milestones."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel
from clientportal.domain.records import MilestoneStatus


class ProjectCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255, examples=["Website redesign"])


class ProjectUpdate(CamelModel):
    """Partial project update — only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    progress: int | None = Field(None, ge=0, le=100)
    deadline: int | None = None
    notes: str | None = None


class ProjectResponse(CamelModel):
    id: str
    client_id: str
    title: str
    progress: int
    deadline: int | None
    notes: str
    updated_at: int


class MilestoneCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class MilestoneUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: MilestoneStatus | None = None
    due_date: int | None = None
    files: list[str] | None = None


class MilestoneResponse(CamelModel):
    id: str
    project_id: str
    title: str
    description: str
    status: MilestoneStatus
    due_date: int | None
    files: list[str]
    updated_at: int


class ProjectWithMilestonesResponse(ProjectResponse):
    milestones: list[MilestoneResponse] = []
