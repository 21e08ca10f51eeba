"""Project and Milestone records."""

from dataclasses import dataclass, field
from enum import Enum

from clientportal.domain.records.base import Record


class MilestoneStatus(str, Enum):
    """Progress of a single milestone."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Project(Record):
    client_id: str = ""
    title: str = ""
    progress: int = 0  # 0-100
    deadline: int | None = None  # epoch millis
    notes: str = ""
    updated_at: int = 0


@dataclass
class Milestone(Record):
    """A deliverable within a project. ``files`` holds URLs; uploads are mocked."""

    project_id: str = ""
    title: str = ""
    description: str = ""
    status: MilestoneStatus = MilestoneStatus.TODO
    due_date: int | None = None
    files: list[str] = field(default_factory=list)
    updated_at: int = 0

    def __post_init__(self) -> None:
        self.status = MilestoneStatus(self.status)
