"""REST board endpoints for the PRD Kanban API.

All endpoints are prefixed with /api/v1 via the router.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from prd_kanban.api.auth import verify_api_key
from prd_kanban.api.schemas import (
    BoardResponse,
    GenerateBoardRequest,
    RenderBoardRequest,
    TemplateListResponse,
)
from prd_kanban.board import (
    ExportFormatError,
    TemplateError,
    from_export,
    generate,
    list_templates,
    to_export,
    to_outline,
)
from prd_kanban.models.task import KanbanDocument

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["boards"])


def _board_response(doc: KanbanDocument) -> BoardResponse:
    return BoardResponse(document=doc, outline=to_outline(doc), export=to_export(doc))


@router.get(
    "/templates",
    response_model=TemplateListResponse,
    dependencies=[Depends(verify_api_key)],
)
async def get_templates() -> TemplateListResponse:
    """List available board templates."""
    return TemplateListResponse(templates=list_templates())


@router.post(
    "/boards",
    response_model=BoardResponse,
    dependencies=[Depends(verify_api_key)],
)
async def create_board(body: GenerateBoardRequest) -> BoardResponse:
    """Generate a board from the four PRD fields."""
    try:
        doc = generate(body.to_input(), template=body.template)
    except FileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TemplateError as e:
        logger.error("Broken board template '%s': %s", body.template, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return _board_response(doc)


@router.post(
    "/boards/render",
    response_model=BoardResponse,
    dependencies=[Depends(verify_api_key)],
)
async def render_board(body: RenderBoardRequest) -> BoardResponse:
    """Re-render a previously exported board."""
    try:
        doc = from_export(body.export)
    except ExportFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _board_response(doc)
