"""Fixed-size pagination over the ranking collection."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

PAGE_SIZE = 20


class Paginator:
    """Slices an ordered collection of `total_items` into pages of `page_size`."""

    def __init__(self, total_items: int, page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.total_items = total_items
        self.page_size = page_size

    @property
    def total_pages(self) -> int:
        """Number of pages, at least 1 even for an empty collection."""
        return max(1, math.ceil(self.total_items / self.page_size))

    def contains(self, page: int) -> bool:
        """Whether `page` is a navigable page number."""
        return 1 <= page <= self.total_pages

    def bounds(self, page: int) -> tuple[int, int]:
        """Half-open index range `[start, end)` of a page."""
        start = (page - 1) * self.page_size
        end = min(page * self.page_size, self.total_items)
        return start, max(start, end)

    def slice(self, items: Sequence[T], page: int) -> list[T]:
        start, end = self.bounds(page)
        return list(items[start:end])


@dataclass(frozen=True)
class PaginationControls:
    """Prev/next navigation shown when there is more than one page."""

    current_page: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages} ({self.total_items} distros)"


@dataclass(frozen=True)
class PaginationView:
    """Either navigation controls or, for a single page, the total count."""

    controls: PaginationControls | None
    summary: str | None = None

    @classmethod
    def build(cls, paginator: Paginator, current_page: int) -> "PaginationView":
        if paginator.total_pages <= 1:
            return cls(controls=None, summary=f"{paginator.total_items} distributions")
        return cls(
            controls=PaginationControls(
                current_page=current_page,
                total_pages=paginator.total_pages,
                total_items=paginator.total_items,
            )
        )

    @property
    def text(self) -> str:
        return self.controls.label if self.controls else (self.summary or "")
