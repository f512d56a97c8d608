"""
Rocks API — Root Route
========================

What:  GET / — a fixed plain-text greeting.
Who:   Anyone checking the server is up; also the first stop of the tutorial.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

GREETING = "Hello World"


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
    description="Always returns the text 'Hello World'.",
)
async def root() -> str:
    return GREETING
