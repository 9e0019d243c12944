"""Dashboard session: owns the ranking collection and view state."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from distrovitals.api.client import ApiError, DistroVitalsClient
from distrovitals.models.schemas import RankingEntry
from distrovitals.presentation.detail import DetailView, compose_detail
from distrovitals.presentation.pagination import PAGE_SIZE, Paginator
from distrovitals.presentation.rankings import RankingView, build_ranking_view
from distrovitals.presentation.state import (
    ViewState,
    back_to_list,
    find_entry,
    go_to_page,
    select_entry,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardSession:
    """State for one dashboard session.

    The ranking collection is fetched once and never mutated; pages and
    detail views are derived from it. View state only changes through the
    synchronous handlers `go_to_page`, `select` and `back`.

    Usage:
        session = DashboardSession(DistroVitalsClient("http://localhost:8080"))
        await session.load()
        view = session.ranking_view()
        detail = await session.open_detail("debian")
    """

    def __init__(self, client: DistroVitalsClient, page_size: int = PAGE_SIZE) -> None:
        self.client = client
        self.page_size = page_size
        self.state = ViewState()
        self.rankings: list[RankingEntry] | None = None
        self.load_error: str | None = None
        self._loaded = False
        # Bumped on every selection change; detail responses from an older
        # selection are discarded.
        self._selection_seq = 0

    @property
    def collection(self) -> list[RankingEntry]:
        return self.rankings or []

    @property
    def total_pages(self) -> int:
        return Paginator(len(self.collection), self.page_size).total_pages

    async def load(self) -> None:
        """Fetch the ranking collection. Only the first call hits the network."""
        if self._loaded:
            return
        self._loaded = True
        try:
            self.rankings = await self.client.get_rankings()
        except ApiError as e:
            logger.warning("Failed to load rankings: %s", e)
            self.load_error = str(e)
        else:
            logger.debug("Loaded %d ranking entries", len(self.rankings))

    def ranking_view(self) -> RankingView:
        if self.load_error is not None:
            return RankingView.failed(self.load_error)
        return build_ranking_view(self.collection, self.state, self.page_size)

    def go_to_page(self, page: int) -> bool:
        """Change page. Returns False, leaving the state alone, when out of range."""
        new_state = go_to_page(self.state, page, self.total_pages)
        changed = new_state != self.state
        self.state = new_state
        return changed

    def select(self, slug: str) -> RankingEntry | None:
        """Select a distribution. Unknown slugs are a no-op returning None."""
        entry = find_entry(self.collection, slug)
        if entry is None:
            logger.debug("Ignoring selection of unknown slug %r", slug)
            return None
        self.state = select_entry(self.state, self.collection, slug)
        self._selection_seq += 1
        return entry

    def back(self) -> None:
        self.state = back_to_list(self.state)
        self._selection_seq += 1

    async def _optional(self, what: str, fetch: Awaitable[T]) -> T | None:
        try:
            return await fetch
        except ApiError as e:
            logger.debug("No %s data: %s", what, e)
            return None

    async def load_detail(self, slug: str) -> DetailView | None:
        """Fetch optional health and history data and compose the detail view.

        The two fetches run concurrently and fail independently. Returns None
        when `slug` is unknown, or when the selection changed while the
        fetches were in flight.
        """
        entry = find_entry(self.collection, slug)
        if entry is None:
            return None
        seq = self._selection_seq

        health, history = await asyncio.gather(
            self._optional("health", self.client.get_health(slug)),
            self._optional("history", self.client.get_history(slug)),
        )

        if not self.is_current(slug, seq):
            logger.debug("Discarding stale detail response for %r", slug)
            return None
        return compose_detail(entry, health, history)

    def is_current(self, slug: str, seq: int) -> bool:
        """Whether a response started at `seq` for `slug` is still wanted."""
        return self.state.selected_slug == slug and self._selection_seq == seq

    async def open_detail(self, slug: str) -> DetailView | None:
        """Select `slug` and load its detail view."""
        if self.select(slug) is None:
            return None
        return await self.load_detail(slug)
