"""One-shot initialization gate."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Callable

from .errors import InitializationError

logger = logging.getLogger(__name__)


class State(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class Readiness:
    """Runs a loader exactly once and lets any number of callers wait on it.

    The loader is scheduled as soon as an event loop is available: at
    construction when called from a coroutine, otherwise on the first
    ``wait()``. Concurrent waiters share the same task. A failed load
    is permanent and every ``wait()`` re-raises its error. Cancelling the
    load task itself counts as a failed load.
    """

    def __init__(self, loader: Callable[[], Awaitable[None]], location: str = "<store>") -> None:
        self._loader = loader
        self._location = location
        self._state = State.LOADING
        self._error: Exception | None = None
        self._task: asyncio.Task[None] | None = None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._start()

    @property
    def state(self) -> State:
        return self._state

    @property
    def error(self) -> Exception | None:
        return self._error

    def _start(self) -> asyncio.Task[None]:
        if self._task is None:
            self._task = asyncio.ensure_future(self._run())
        return self._task

    async def _run(self) -> None:
        try:
            await self._loader()
        except Exception as e:
            logger.debug("Initialization failed: %s", e)
            self._error = e
            self._state = State.FAILED
            return
        except asyncio.CancelledError:
            logger.debug("Initialization cancelled for %s", self._location)
            self._error = InitializationError(self._location, "load was cancelled")
            self._state = State.FAILED
            raise
        self._state = State.READY

    async def wait(self) -> None:
        """Block until the load has finished; raise if it failed."""
        if self._state is State.LOADING:
            task = self._start()
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
        if self._error is not None:
            raise self._error
