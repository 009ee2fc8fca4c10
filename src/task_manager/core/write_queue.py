# src/task_manager/core/write_queue.py

from __future__ import annotations

"""
Background writer for fire-and-forget persistence.

Callers submit the value to persist and return immediately. The queue keeps at
most one write in flight; values submitted meanwhile are coalesced so only the
latest one is written next. Failures are logged and recorded, never raised to
the submitter.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NOTHING: object = object()


class WriteQueue(Generic[T]):
    def __init__(self, write: Callable[[T], Awaitable[bool]], *, name: str = "write") -> None:
        self._write = write
        self._name = name
        self._pending: object = _NOTHING
        self._runner: asyncio.Task[None] | None = None

        self.writes = 0
        self.failures = 0
        self.last_error: BaseException | str | None = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not _NOTHING

    @property
    def busy(self) -> bool:
        return self._runner is not None and not self._runner.done()

    def submit(self, value: T) -> None:
        """Queue `value` as the next thing to write (replacing any unwritten value)."""
        self._pending = value

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop yet: keep it pending, flush() will write it.
            logger.debug("%s: no running loop, write deferred until flush", self._name)
            return

        if not self.busy:
            self._runner = loop.create_task(self._drain(), name=f"{self._name}-writer")

    async def flush(self) -> None:
        """Wait until everything submitted so far has been written (or has failed)."""
        while True:
            runner = self._runner
            if runner is not None and not runner.done():
                await runner
                continue
            if self.has_pending:
                loop = asyncio.get_running_loop()
                self._runner = loop.create_task(self._drain(), name=f"{self._name}-writer")
                continue
            return

    async def _drain(self) -> None:
        while self._pending is not _NOTHING:
            value = self._pending
            self._pending = _NOTHING
            await self._write_one(value)  # type: ignore[arg-type]

    async def _write_one(self, value: T) -> None:
        try:
            ok = await self._write(value)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.failures += 1
            self.last_error = e
            logger.exception("%s failed", self._name)
            return

        if ok is False:
            self.failures += 1
            self.last_error = f"{self._name} reported failure"
            logger.warning("%s reported failure", self._name)
            return

        self.writes += 1
        self.last_error = None
        logger.debug("%s ok (total=%d)", self._name, self.writes)
