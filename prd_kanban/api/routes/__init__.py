"""PRD Kanban API route modules."""

from prd_kanban.api.routes.boards import router as boards_router

__all__ = ["boards_router"]
