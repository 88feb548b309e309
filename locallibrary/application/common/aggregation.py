"""
Concurrent join of independent reads.

``join`` is the single concurrency primitive used by every aggregation in
the application: all member operations are put in flight before any of them
is awaited, and the caller receives one keyed result map once every member
has finished.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

logger = logging.getLogger(__name__)


async def join(**operations: Awaitable[Any]) -> dict[str, Any]:
    """
    Run independent operations concurrently and join their results by name.

    Results are keyed by the keyword each operation was passed under, so the
    mapping does not depend on completion order. If any operation fails, the
    join fails with that operation's error and no partial results are
    returned. Sibling operations are not cancelled; they run to completion
    and their outcome is discarded.

    Example:
        results = await join(
            authors=author_repository.find(),
            genres=genre_repository.find(),
        )
        results["authors"], results["genres"]

    Args:
        **operations: Awaitables keyed by result name

    Returns:
        Dict mapping each name to its operation's result

    Raises:
        Exception: The first error raised by any member operation
    """
    names = list(operations)
    logger.debug(f"Joining {len(names)} operations: {', '.join(names)}")

    results = await asyncio.gather(*operations.values())

    return dict(zip(names, results, strict=True))
