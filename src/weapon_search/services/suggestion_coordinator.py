"""Incremental weapon search: debounced lookups with stale-response rejection.

The coordinator owns the live query. Keystrokes go through ``set_query``; once
typing settles the debouncer commits the query and a lookup is issued. Every
issued lookup takes the next value of a monotonic sequence token, and a
response is applied only when its token is still the latest one issued and its
query still equals the live query. Older responses that arrive late are logged
and dropped, so the suggestion list always reflects the most recently issued
lookup rather than the most recently completed one.

The host feeds focus and pointer events in explicitly (``focus_gained``,
``focus_lost``, ``outside_interaction``) and receives a ``SuggestionState``
snapshot after every change through ``on_change``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import suppress
from dataclasses import dataclass
import logging
from typing import Any

from weapon_search.config import Settings
from weapon_search.domain.weapon import SearchResponse, Weapon
from weapon_search.observability.tracing import create_span
from weapon_search.services.debouncer import DEFAULT_SETTLE_DELAY, QueryDebouncer


logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 10

SearchFunction = Callable[[str], Awaitable[SearchResponse]]
SelectionCallback = Callable[[Weapon], None]


@dataclass(frozen=True, slots=True)
class SuggestionState:
    """Snapshot of everything a host needs to render the search box."""

    query: str
    suggestions: tuple[Weapon, ...]
    is_open: bool
    is_searching: bool
    has_focus: bool

    @property
    def dropdown_visible(self) -> bool:
        return self.is_open and bool(self.suggestions)


class SuggestionCoordinator:
    """Drive suggestion lookups for a single search box."""

    def __init__(
        self,
        search: SearchFunction,
        on_select: SelectionCallback,
        *,
        on_change: Callable[[SuggestionState], None] | None = None,
        debounce_delay: float = DEFAULT_SETTLE_DELAY,
        min_query_length: int = MIN_QUERY_LENGTH,
        max_suggestions: int = MAX_SUGGESTIONS,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._search = search
        self._on_select = on_select
        self._on_change = on_change
        self.min_query_length = min_query_length
        self.max_suggestions = max_suggestions
        self._debouncer = QueryDebouncer(self._issue_lookup, delay=debounce_delay, loop=loop)

        self._query = ""
        self._suggestions: tuple[Weapon, ...] = ()
        self._open = False
        self._searching = False
        self._has_focus = False
        self._issued = 0
        self._lookups: set[asyncio.Task] = set()
        self._disposed = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        search: SearchFunction,
        on_select: SelectionCallback,
        **kwargs: Any,
    ) -> SuggestionCoordinator:
        return cls(
            search,
            on_select,
            debounce_delay=settings.debounce_seconds(),
            min_query_length=settings.min_query_length,
            max_suggestions=settings.max_suggestions,
            **kwargs,
        )

    @property
    def query(self) -> str:
        return self._query

    @property
    def suggestions(self) -> tuple[Weapon, ...]:
        return self._suggestions

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_searching(self) -> bool:
        return self._searching

    @property
    def dropdown_visible(self) -> bool:
        return self._open and bool(self._suggestions)

    @property
    def lookups_issued(self) -> int:
        return self._issued

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def state(self) -> SuggestionState:
        return SuggestionState(
            query=self._query,
            suggestions=self._suggestions,
            is_open=self._open,
            is_searching=self._searching,
            has_focus=self._has_focus,
        )

    def set_query(self, query: str) -> None:
        """Update the live query text.

        Queries shorter than ``min_query_length`` once trimmed clear the list,
        close the display and invalidate any lookup still in flight. Longer
        queries restart the debounce timer.
        """
        if self._disposed:
            logger.debug("Coordinator disposed; ignoring query update")
            return
        if query == self._query:
            return
        self._query = query

        if len(query.strip()) < self.min_query_length:
            self._debouncer.cancel()
            self._invalidate_lookups()
            self._suggestions = ()
            self._open = False
        else:
            self._debouncer.update(query)
        self._notify()

    def select_suggestion(self, weapon: Weapon) -> None:
        """Accept ``weapon``: fill the box with its name and end the suggestion cycle."""
        if self._disposed:
            logger.debug("Coordinator disposed; ignoring selection")
            return
        self._debouncer.cancel()
        self._invalidate_lookups()
        self._query = weapon.name
        self._open = False
        self._suggestions = ()
        self._notify()
        self._on_select(weapon)

    def focus_gained(self) -> None:
        """Reopen cached suggestions without issuing a new lookup."""
        if self._disposed:
            return
        self._has_focus = True
        if self._suggestions:
            self._open = True
        self._notify()

    def focus_lost(self) -> None:
        # Blur alone keeps the list open; a click on a suggestion blurs the input first.
        if self._disposed:
            return
        self._has_focus = False
        self._notify()

    def outside_interaction(self) -> None:
        """Pointer interaction outside the input and the list closes the display.

        Query text and cached suggestions are kept.
        """
        if self._disposed or not self._open:
            return
        self._open = False
        self._notify()

    def flush(self) -> bool:
        """Issue the pending lookup now instead of waiting for the timer."""
        if self._disposed:
            return False
        return self._debouncer.flush()

    async def drain(self) -> None:
        """Wait for every lookup currently in flight to finish."""
        while self._lookups:
            await asyncio.gather(*list(self._lookups), return_exceptions=True)

    def dispose(self) -> None:
        """Tear down: no timer fires and no lookup result is applied afterwards."""
        if self._disposed:
            return
        self._debouncer.close()
        self._invalidate_lookups()
        self._disposed = True
        logger.debug("Suggestion coordinator disposed with %d lookup(s) in flight", len(self._lookups))

    async def aclose(self) -> None:
        """Dispose and cancel in-flight lookup tasks."""
        self.dispose()
        for task in list(self._lookups):
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task

    def _invalidate_lookups(self) -> None:
        self._issued += 1
        self._searching = False

    def _issue_lookup(self, query: str) -> None:
        self._issued += 1
        token = self._issued
        self._searching = True
        logger.debug("Issuing lookup %d for %r", token, query)
        task = asyncio.create_task(self._run_lookup(token, query))
        self._lookups.add(task)
        task.add_done_callback(self._lookups.discard)
        self._notify()

    async def _run_lookup(self, token: int, query: str) -> None:
        results: tuple[Weapon, ...] | None
        try:
            with create_span("weapon_search.lookup", attributes={"query": query.strip(), "token": token}):
                response = await self._search(query.strip())
            results = tuple(response.results[: self.max_suggestions])
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("Lookup %d for %r failed: %s", token, query, exc, exc_info=True)
            results = None

        if self._is_stale(token, query):
            logger.debug("Dropping stale response %d for %r", token, query)
            if not self._disposed and token == self._issued and self._searching:
                # Query moved on but its lookup has not been issued yet; nothing is in flight.
                self._searching = False
                self._notify()
            return

        self._searching = False
        if results is None:
            self._suggestions = ()
        else:
            self._suggestions = results
            self._open = True
        self._notify()

    def _is_stale(self, token: int, query: str) -> bool:
        return self._disposed or token != self._issued or query != self._query

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)
