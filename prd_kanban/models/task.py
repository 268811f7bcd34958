"""Board models: input echo, tasks, columns and the generated document."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class TaskStatus(str, Enum):
    """Kanban column a task belongs to."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds, e.g. 2026-10-19T08:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class KanbanInput(BaseModel):
    """The four free-text PRD fields, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    goal: str = ""
    constraints: str = ""
    duration: str = ""
    team: str = ""


class Column(BaseModel):
    """A fixed status bucket on the board."""

    model_config = ConfigDict(frozen=True)

    key: TaskStatus
    title: str


class Task(BaseModel):
    """A single card on the board."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    estimate_hours: float | None = Field(default=None, ge=0)
    depends_on: tuple[str, ...] | None = None
    acceptance: tuple[str, ...] | None = None


class KanbanDocument(BaseModel):
    """The full generated board."""

    model_config = ConfigDict(frozen=True)

    title: str
    created_at: datetime
    input: KanbanInput = Field(default_factory=KanbanInput)
    columns: tuple[Column, ...] = ()
    tasks: tuple[Task, ...] = ()

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    def tasks_by_status(self) -> dict[TaskStatus, list[Task]]:
        """Partition tasks into status buckets, keeping their relative order."""
        buckets: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
        for task in self.tasks:
            buckets[task.status].append(task)
        return buckets

    def get_task(self, task_id: str) -> Task | None:
        """Look up a task by identifier."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def total_estimate_hours(self) -> float:
        """Sum of all task estimates (tasks without one count as zero)."""
        return sum(t.estimate_hours or 0 for t in self.tasks)
