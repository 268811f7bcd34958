"""Pydantic request/response models for the PRD Kanban REST API."""

from pydantic import BaseModel, Field

from prd_kanban.board.loader import DEFAULT_TEMPLATE
from prd_kanban.models.task import KanbanDocument, KanbanInput


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class GenerateBoardRequest(BaseModel):
    """Request body for POST /api/v1/boards. Every field may be empty."""

    goal: str = Field(default="", description="What the product should achieve")
    constraints: str = Field(default="", description="Constraints to respect")
    duration: str = Field(default="", description="Available time, free text")
    team: str = Field(default="", description="Team composition, free text")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Board template name")

    def to_input(self) -> KanbanInput:
        return KanbanInput(
            goal=self.goal,
            constraints=self.constraints,
            duration=self.duration,
            team=self.team,
        )


class RenderBoardRequest(BaseModel):
    """Request body for POST /api/v1/boards/render."""

    export: str = Field(..., min_length=1, description="JSON export of a board")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class BoardResponse(BaseModel):
    """A board with both of its text renderings."""

    document: KanbanDocument
    outline: str
    export: str


class TemplateListResponse(BaseModel):
    """Response for GET /api/v1/templates."""

    templates: list[str] = Field(default_factory=list)
