"""Dispatchers for hosts driven by an asyncio event loop."""

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger("PagedList.AsyncioDispatcher")


class AsyncioDispatcher:
    """Runs callbacks on the thread driving the given asyncio loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        if self.loop.is_closed():
            logger.debug("Event loop closed, dropping dispatched callback")
            return
        self.loop.call_soon_threadsafe(callback, *args)
