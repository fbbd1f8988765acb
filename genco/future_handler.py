"""Running asynchronous work from synchronous code."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


def wait(awaitable: Awaitable[T]) -> T:
    """Run ``awaitable`` on a fresh event loop and return its result."""

    async def _run() -> T:
        return await awaitable

    return asyncio.run(_run())