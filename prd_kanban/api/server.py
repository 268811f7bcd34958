"""FastAPI server for PRD Kanban.

Wires the board endpoints, CORS and the health check.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prd_kanban import __version__
from prd_kanban.api.routes import boards_router
from prd_kanban.utils.env import get_cors_origins

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="PRD Kanban",
    description="Deterministic PRD to Kanban board generator API",
    version=__version__,
)

# Origins are fixed for the life of the process; the API key is re-read per request
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(boards_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
