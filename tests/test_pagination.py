"""Tests for the pagination engine and page navigation."""

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from distrovitals.presentation.pagination import Paginator, PaginationView
from distrovitals.presentation.state import ViewState, go_to_page


@given(
    total=st.integers(min_value=0, max_value=500),
    page_size=st.integers(min_value=1, max_value=50),
    current=st.integers(min_value=1, max_value=10),
    target=st.integers(min_value=-5, max_value=600),
)
@settings(max_examples=200)
def test_go_to_page_changes_only_within_range(
    total: int, page_size: int, current: int, target: int
) -> None:
    paginator = Paginator(total, page_size)
    state = ViewState(current_page=min(current, paginator.total_pages))

    new_state = go_to_page(state, target, paginator.total_pages)

    if 1 <= target <= math.ceil(total / page_size):
        assert new_state.current_page == target
    else:
        assert new_state == state


@given(
    total=st.integers(min_value=1, max_value=500),
    page_size=st.integers(min_value=1, max_value=50),
)
@settings(max_examples=100)
def test_pages_cover_collection_exactly_once(total: int, page_size: int) -> None:
    items = list(range(total))
    paginator = Paginator(total, page_size)

    pages = [paginator.slice(items, k) for k in range(1, paginator.total_pages + 1)]

    assert [i for page in pages for i in page] == items
    assert all(len(page) == page_size for page in pages[:-1])
    assert 1 <= len(pages[-1]) <= page_size


def test_empty_collection_has_one_page() -> None:
    paginator = Paginator(0, 20)

    assert paginator.total_pages == 1
    assert paginator.slice([], 1) == []


def test_bounds_of_last_partial_page() -> None:
    paginator = Paginator(45, 20)

    assert paginator.total_pages == 3
    assert paginator.bounds(3) == (40, 45)


def test_single_page_shows_total_count_instead_of_controls() -> None:
    view = PaginationView.build(Paginator(12, 20), 1)

    assert view.controls is None
    assert view.text == "12 distributions"


def test_controls_disable_prev_on_first_and_next_on_last_page() -> None:
    first = PaginationView.build(Paginator(45, 20), 1).controls
    last = PaginationView.build(Paginator(45, 20), 3).controls

    assert first.label == "Page 1 of 3 (45 distros)"
    assert not first.has_previous and first.has_next
    assert last.has_previous and not last.has_next
