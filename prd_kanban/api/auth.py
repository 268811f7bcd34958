"""Optional ``X-API-Key`` check for the board endpoints.

Setting PRD_KANBAN_API_KEY turns the check on; it is looked up per request.
"""

import logging
import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from prd_kanban.utils.env import get_api_key

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def key_matches(supplied: str | None, expected: str) -> bool:
    """Constant-time comparison of the supplied header against the configured key."""
    if not supplied:
        return False
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


async def verify_api_key(supplied: str | None = Security(_key_header)) -> None:
    """Reject the request with 401 unless the configured key was sent."""
    expected = get_api_key()
    if expected is None or key_matches(supplied, expected):
        return
    logger.info("Rejected request with %s API key", "a wrong" if supplied else "no")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
        headers={"WWW-Authenticate": API_KEY_HEADER},
    )
