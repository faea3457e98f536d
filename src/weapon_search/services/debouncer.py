"""Trailing-edge debounce for query updates."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging


logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY = 0.3


class QueryDebouncer:
    """Commit the latest query once updates have paused for ``delay`` seconds.

    Every ``update`` cancels the timer started by the previous one, so a burst
    of updates produces a single commit carrying the final value. Timers run on
    the asyncio event loop; ``close`` cancels the pending timer and makes all
    later updates no-ops.
    """

    def __init__(
        self,
        on_commit: Callable[[str], None],
        *,
        delay: float = DEFAULT_SETTLE_DELAY,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._on_commit = on_commit
        self.delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._pending_value: str | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def pending_value(self) -> str | None:
        return self._pending_value

    @property
    def closed(self) -> bool:
        return self._closed

    def update(self, value: str) -> None:
        """Restart the settle timer for ``value``."""
        if self._closed:
            logger.debug("Debouncer closed; ignoring update")
            return
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._pending_value = value
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending commit, if any."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_value = None

    def flush(self) -> bool:
        """Commit the pending value immediately.

        Returns:
            True if a commit was delivered
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def close(self) -> None:
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        value = self._pending_value
        self._handle = None
        self._pending_value = None
        if self._closed or value is None:
            return
        self._on_commit(value)
