"""Application service (use case) for projects and their milestones."""

import logging
import uuid
from typing import Any

from pydantic import BaseModel

from clientportal.application.interfaces import RecordStore
from clientportal.application.persistence import MilestoneEntity, ProjectEntity
from clientportal.application.schemas import (
    MilestoneCreate,
    MilestoneUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from clientportal.domain.exceptions import EntityNotFoundError
from clientportal.domain.records import Milestone, MilestoneStatus, Project, epoch_millis

logger = logging.getLogger(__name__)


def _patch_payload(data: BaseModel, nullable: frozenset[str] = frozenset()) -> dict[str, Any]:
    """Fields present in the request; explicit nulls only where the field allows them."""
    return {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key in nullable
    }


class ProjectService:
    """Orchestrates project and milestone CRUD. Depends on the record store port (DI)."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def list_client_projects(self, client_id: str) -> list[Project]:
        projects = (await ProjectEntity.list_all(self._store)).items
        return [p for p in projects if p.client_id == client_id]

    async def list_projects_with_milestones(
        self, client_id: str
    ) -> list[tuple[Project, list[Milestone]]]:
        """Client projects, each with its milestones ordered by due date (undated first)."""
        projects = await self.list_client_projects(client_id)
        milestones = (await MilestoneEntity.list_all(self._store)).items
        return [
            (
                project,
                sorted(
                    (m for m in milestones if m.project_id == project.id),
                    key=lambda m: m.due_date or 0,
                ),
            )
            for project in projects
        ]

    async def create_project(self, client_id: str, data: ProjectCreate) -> Project:
        project = Project(
            id=str(uuid.uuid4()),
            client_id=client_id,
            title=data.title,
            progress=0,
            deadline=None,
            notes="",
            updated_at=epoch_millis(),
        )
        return await ProjectEntity.create(self._store, project)

    async def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        entity = ProjectEntity(self._store, project_id)
        if not await entity.exists():
            raise EntityNotFoundError("Project", project_id)
        updates = _patch_payload(data, nullable=frozenset({"deadline"}))
        updates["updated_at"] = epoch_millis()
        return await entity.patch(updates)

    async def delete_project(self, project_id: str) -> None:
        """Delete the project's milestones, then the project itself."""
        milestone_ids = [
            m.id
            for m in (await MilestoneEntity.list_all(self._store)).items
            if m.project_id == project_id
        ]
        removed = await MilestoneEntity.delete_many(self._store, milestone_ids)
        if not await ProjectEntity.remove(self._store, project_id):
            raise EntityNotFoundError("Project", project_id)
        logger.info("Deleted project '%s' with %d milestones", project_id, removed)

    async def create_milestone(self, project_id: str, data: MilestoneCreate) -> Milestone:
        if not await ProjectEntity(self._store, project_id).exists():
            raise EntityNotFoundError("Project", project_id)
        milestone = Milestone(
            id=str(uuid.uuid4()),
            project_id=project_id,
            title=data.title,
            description=data.description,
            status=MilestoneStatus.TODO,
            due_date=None,
            files=[],
            updated_at=epoch_millis(),
        )
        return await MilestoneEntity.create(self._store, milestone)

    async def update_milestone(self, milestone_id: str, data: MilestoneUpdate) -> Milestone:
        entity = MilestoneEntity(self._store, milestone_id)
        if not await entity.exists():
            raise EntityNotFoundError("Milestone", milestone_id)
        updates = _patch_payload(data, nullable=frozenset({"due_date"}))
        updates["updated_at"] = epoch_millis()
        return await entity.patch(updates)

    async def delete_milestone(self, milestone_id: str) -> None:
        if not await MilestoneEntity.remove(self._store, milestone_id):
            raise EntityNotFoundError("Milestone", milestone_id)
