"""Dashboard view state and its transitions.

The state is an immutable value: every transition returns a new `ViewState`
(or the same one when the transition is a no-op), so callers can compare
before/after to know whether anything changed.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from distrovitals.models.schemas import RankingEntry


@dataclass(frozen=True)
class ViewState:
    """Current list page and selected distribution, if any."""

    current_page: int = 1
    selected_slug: str | None = None

    @property
    def in_detail(self) -> bool:
        return self.selected_slug is not None


def find_entry(collection: Sequence[RankingEntry], slug: str | None) -> RankingEntry | None:
    """Resolve a slug to its entry, or None for a stale reference."""
    if slug is None:
        return None
    return next((entry for entry in collection if entry.slug == slug), None)


def go_to_page(state: ViewState, page: int, total_pages: int) -> ViewState:
    """Move to `page`; pages outside `[1, total_pages]` leave the state unchanged."""
    if page < 1 or page > total_pages:
        return state
    return replace(state, current_page=page)


def select_entry(state: ViewState, collection: Sequence[RankingEntry], slug: str) -> ViewState:
    """Select the entry with `slug`; unknown slugs leave the state unchanged."""
    if find_entry(collection, slug) is None:
        return state
    return replace(state, selected_slug=slug)


def back_to_list(state: ViewState) -> ViewState:
    """Leave the detail view, keeping the current page."""
    return replace(state, selected_slug=None)
