# src/scoreforge/scheduling.py

"""Delayed callbacks on the running event loop."""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def run_after_seconds(
    task: Callable[[], object],
    seconds: float,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.TimerHandle:
    """Schedule ``task`` to run once after ``seconds`` on ``loop``.

    Callbacks run on the loop's thread, one at a time, so they never overlap
    a storage call made from the same loop. Cancel the returned handle to
    drop the callback before it fires.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    logger.debug("Scheduling %r in %.3fs", task, seconds)
    return loop.call_later(max(seconds, 0.0), task)
