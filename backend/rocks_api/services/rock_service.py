"""
Rocks API — Rock Service
==========================

What:  Read-only access to the rock collection.
Why:   Keeps index parsing and bounds checking out of the route handlers.
Who:   Called by routes/rocks.py.

Indexing rules:
    The index path segment is always a string. It selects an element only
    when it is a plain non-negative base-10 integer inside the collection:

        "0"    → ROCKS[0]
        "007"  → ROCKS[7]
        "-1"   → RockNotFoundError (no wrap-around from the end)
        "1.0"  → RockNotFoundError
        "abc"  → RockNotFoundError
        "99"   → RockNotFoundError (past the end)
"""

import logging
from typing import List, Sequence

from rocks_api.exceptions import RockNotFoundError
from rocks_api.models.rocks import ROCKS
from rocks_api.schemas.rock import RockParams

logger = logging.getLogger(__name__)


class RockService:
    """
    Stateless view over an immutable rock collection.

    The collection is injectable so tests can exercise edge cases (an empty
    collection, a single element) without touching the module constant.
    """

    def __init__(self, rocks: Sequence[str] = ROCKS):
        self._rocks = tuple(rocks)

    def list_rocks(self) -> List[str]:
        """Return the whole collection, in order, as a fresh list."""
        return list(self._rocks)

    def get_rock(self, index: str) -> str:
        """
        Return the rock at position `index`.

        Raises:
            RockNotFoundError: index is not a non-negative integer within range
        """
        # str.isdigit() also accepts characters like "²"; restrict to ASCII
        if not (index.isascii() and index.isdigit()):
            logger.debug("Rejected non-numeric rock index %r", index)
            raise RockNotFoundError(index, len(self._rocks))

        position = int(index)
        if position >= len(self._rocks):
            logger.debug("Rock index %d out of range (size %d)", position, len(self._rocks))
            raise RockNotFoundError(index, len(self._rocks))

        return self._rocks[position]

    def describe(self, index: str, name: str) -> RockParams:
        """Echo both path parameters back, unvalidated."""
        return RockParams(index=index, name=name)


# Module-level singleton
rock_service = RockService()
