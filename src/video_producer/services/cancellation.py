"""Cooperative cancellation for production runs."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from video_producer.domain.errors import ProductionCancelledError

T = TypeVar("T")


class CancellationToken:
    """Cancellation signal threaded through every suspension point of a run.

    Scripted pauses (``sleep``) and network calls (``guard``) both race
    against the signal, so a cancelled run stops at the next await instead of
    finishing the current step.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "Cancelled by user") -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise ProductionCancelledError(self.reason or "Cancelled")

    async def sleep(self, seconds: float) -> None:
        """Pause for ``seconds`` unless cancelled first."""
        self.raise_if_cancelled()
        if seconds <= 0:
            return
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except TimeoutError:
            return
        self.raise_if_cancelled()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable``, abandoning it if the token fires first.

        Raises:
            ProductionCancelledError: If cancelled before the call finished.
        """
        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            self.raise_if_cancelled()
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task in done:
            return task.result()

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        raise ProductionCancelledError(self.reason or "Cancelled")
