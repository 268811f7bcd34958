"""Pydantic models for board templates: baseline tasks, input-derived extras, columns."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from prd_kanban.models.task import Column, TaskStatus


class InputField(str, Enum):
    """Optional input fields that can produce an extra task."""

    CONSTRAINTS = "constraints"
    DURATION = "duration"
    TEAM = "team"


class TaskTemplate(BaseModel):
    """A baseline task, declared once with its dependencies by key."""

    key: str
    title: str
    estimate_hours: float | None = Field(default=None, ge=0)
    depends_on: list[str] = Field(default_factory=list)
    acceptance: list[str] = Field(default_factory=list)


class ExtraTemplate(BaseModel):
    """A task appended when the given input field is non-empty.

    ``title`` is a format string; ``{value}`` is replaced with the trimmed
    field value, cut to ``max_chars`` (plus an ellipsis) when that is set.
    """

    key: str
    field: InputField
    title: str
    max_chars: int = Field(default=0, ge=0)
    estimate_hours: float | None = Field(default=None, ge=0)
    depends_on: list[str] = Field(default_factory=list)
    acceptance: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _check_placeholder(cls, title: str) -> str:
        try:
            title.format(value="")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Title may only use the {{value}} placeholder: {title!r}") from e
        return title


def _default_columns() -> list[Column]:
    return [
        Column(key=TaskStatus.TODO, title="Todo"),
        Column(key=TaskStatus.DOING, title="Doing"),
        Column(key=TaskStatus.DONE, title="Done"),
    ]


class BoardTemplate(BaseModel):
    """A complete board template loaded from YAML."""

    id: str
    name: str
    description: str = ""
    version: str = "1.0.0"
    board_title: str = "PRD → Kanban"
    id_prefix: str = "T"
    ellipsis: str = "…"
    columns: list[Column] = Field(default_factory=_default_columns)
    baseline: list[TaskTemplate] = Field(default_factory=list)
    extras: list[ExtraTemplate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dependencies(self) -> "BoardTemplate":
        """Dependencies must name a template declared earlier in generation order."""
        seen: set[str] = set()
        for tmpl in self.baseline:
            _check_template(tmpl, seen, allowed=seen)
            seen.add(tmpl.key)

        # Extras are optional, so they may only depend on baseline tasks
        baseline_keys = set(seen)
        for extra in self.extras:
            _check_template(extra, seen, allowed=baseline_keys)
            seen.add(extra.key)

        if sorted(c.key.value for c in self.columns) != sorted(s.value for s in TaskStatus):
            raise ValueError("Columns must list each task status exactly once")
        return self


def _check_template(
    tmpl: TaskTemplate | ExtraTemplate, seen: set[str], allowed: set[str],
) -> None:
    if tmpl.key in seen:
        raise ValueError(f"Duplicate task key '{tmpl.key}'")
    for dep in tmpl.depends_on:
        if dep not in allowed:
            raise ValueError(
                f"Task '{tmpl.key}' depends on '{dep}', "
                "which is not a baseline task declared before it"
            )
