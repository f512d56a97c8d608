"""
Rocks API — Rock Collection Routes
====================================

What:  Handles GET /rocks, GET /rocks/{index} and GET /rocks/{index}/{name}.
How:   Extracts path parameters as strings, delegates to RockService.

Status codes:
    GET /rocks                  200 always
    GET /rocks/{index}          200, or 404 when index names no rock
    GET /rocks/{index}/{name}   200 always (no validation)
"""

from typing import List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from rocks_api.schemas.rock import ErrorResponse, RockParams
from rocks_api.services.rock_service import rock_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/rocks", tags=["Rocks"])


@router.get(
    "",
    response_model=List[str],
    summary="List every rock",
    description="Returns the full, fixed rock collection as a JSON array, in order.",
)
async def list_rocks() -> List[str]:
    return rock_service.list_rocks()


@router.get(
    "/{index}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Rock name as plain text"},
        404: {"description": "No rock at that index", "model": ErrorResponse},
    },
    summary="Get one rock by position",
)
async def get_rock(index: str) -> str:
    """
    Return the rock at a zero-based position.

    Args:
        index: Path segment as sent by the client. Kept as `str` on purpose:
               RockService decides what counts as a valid index so that
               "abc" produces the same 404 as an out-of-range number instead
               of FastAPI's 422.
    """
    return rock_service.get_rock(index)


@router.get(
    "/{index}/{name}",
    response_model=RockParams,
    summary="Echo path parameters",
    description="Returns the index and name path segments verbatim as a JSON object.",
)
async def rock_params(index: str, name: str) -> RockParams:
    return rock_service.describe(index, name)
