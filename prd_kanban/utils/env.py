"""Environment configuration — .env loading and setting lookups.

The getters read the process environment on each call. The API server reads
CORS origins once, when the app is created; the API key is checked per request.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

API_KEY_ENV = "PRD_KANBAN_API_KEY"
CORS_ORIGINS_ENV = "PRD_KANBAN_CORS_ORIGINS"


def load_env() -> Path | None:
    """Load .env from CWD or its parent; return the file used, if any."""
    for search_dir in [Path.cwd(), Path.cwd().parent]:
        env_file = search_dir / ".env"
        if env_file.exists():
            load_dotenv(env_file)
            logger.debug("Loaded environment from %s", env_file)
            return env_file
    return None


def get_api_key() -> str | None:
    """Expected API key; None disables authentication."""
    return os.environ.get(API_KEY_ENV) or None


def get_cors_origins() -> list[str]:
    """Allowed CORS origins, comma-separated in the environment (default: all)."""
    raw = os.environ.get(CORS_ORIGINS_ENV, "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
