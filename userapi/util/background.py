"""Detached background tasks.

The event loop keeps only weak references to tasks, so anything started
with :func:`fire_and_forget` is held here until it finishes.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

_pending: set[asyncio.Task] = set()


def fire_and_forget(coro: Coroutine[Any, Any, Any], name: str | None = None) -> asyncio.Task:
    """Schedule a coroutine without awaiting it.

    The coroutine is responsible for handling its own errors.

    Args:
        coro: Coroutine to run
        name: Optional task name

    Returns:
        The scheduled task
    """
    task = asyncio.create_task(coro, name=name)
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task


async def drain() -> None:
    """Wait until every pending background task of the running loop has finished."""
    loop = asyncio.get_running_loop()
    while tasks := [
        task for task in _pending if task.get_loop() is loop and not task.done()
    ]:
        await asyncio.gather(*tasks, return_exceptions=True)
