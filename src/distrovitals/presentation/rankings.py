"""View model for the paginated ranking list."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from distrovitals.models.schemas import RankingEntry
from distrovitals.presentation.badges import Badge, BadgeSet, compose_badges
from distrovitals.presentation.classifiers import ScoreBar, TrendDisplay, classify_trend, score_bar
from distrovitals.presentation.formatting import format_number
from distrovitals.presentation.pagination import PAGE_SIZE, Paginator, PaginationView
from distrovitals.presentation.state import ViewState

HEADER = ("Rank", "Distribution", "Score", "Contributors", "Releases/30d", "Stars", "Trend")

EMPTY_MESSAGE = (
    "No health scores available yet.",
    "Run dv collect all && dv analyze all to collect data.",
)
LOAD_FAILED_MESSAGE = "Failed to load rankings. Is the server running?"


@dataclass(frozen=True)
class RankingRow:
    """One visible row of the ranking list."""

    slug: str
    name: str
    rank: int
    score: ScoreBar
    contributors: str
    releases_30d: str
    stars: str
    trend: TrendDisplay
    badges: BadgeSet

    @property
    def rank_class(self) -> str:
        """Podium highlight for the top three."""
        return f"rank-{self.rank}" if self.rank <= 3 else ""


@dataclass(frozen=True)
class ErrorBlock:
    """Visible error shown in place of the list."""

    message: str
    detail: str


@dataclass(frozen=True)
class RankingView:
    """Everything needed to draw the list view for one page."""

    header: tuple[str, ...] = HEADER
    rows: tuple[RankingRow, ...] = field(default_factory=tuple)
    pagination: PaginationView | None = None
    current_page: int = 1
    total_pages: int = 1
    empty_message: tuple[str, ...] | None = None
    error: ErrorBlock | None = None

    @classmethod
    def failed(cls, detail: str) -> "RankingView":
        return cls(error=ErrorBlock(message=LOAD_FAILED_MESSAGE, detail=detail))

    @property
    def is_empty(self) -> bool:
        return self.empty_message is not None


def build_row(entry: RankingEntry, position: int) -> RankingRow:
    """Row for `entry` at absolute 1-based `position` in the collection.

    A rank supplied by the backend wins; otherwise the position is the rank.
    """
    m = entry.metrics_or_empty
    return RankingRow(
        slug=entry.slug,
        name=entry.name,
        rank=entry.rank or position,
        score=score_bar("Overall", entry.overall_score, entry.slug),
        contributors=format_number(m.total_contributors),
        releases_30d=format_number(m.releases_30d),
        stars=format_number(m.total_stars),
        trend=classify_trend(entry.trend),
        badges=compose_badges(entry),
    )


def build_ranking_view(
    collection: Sequence[RankingEntry],
    state: ViewState,
    page_size: int = PAGE_SIZE,
) -> RankingView:
    """Build the list view for `state.current_page`.

    Args:
        collection: Ranking entries, best score first.
        state: Current view state; only `current_page` is read.
        page_size: Rows per page.

    Returns:
        RankingView with header, rows and pagination, or the empty-state
        message when the collection has no entries.
    """
    if not collection:
        return RankingView(empty_message=EMPTY_MESSAGE)

    paginator = Paginator(len(collection), page_size)
    page = state.current_page
    start, _ = paginator.bounds(page)
    rows = tuple(
        build_row(entry, start + idx + 1)
        for idx, entry in enumerate(paginator.slice(collection, page))
    )
    return RankingView(
        rows=rows,
        pagination=PaginationView.build(paginator, page),
        current_page=page,
        total_pages=paginator.total_pages,
    )


@dataclass(frozen=True)
class SelectEntry:
    """Row activation: open the detail view for `slug`."""

    slug: str


@dataclass(frozen=True)
class OpenLink:
    """Badge activation: open `url`, leaving the view state alone."""

    url: str


def activate(row: RankingRow, badge: Badge | None = None) -> SelectEntry | OpenLink:
    """Resolve what activating a row, or one of its badges, should do.

    Badge activation never falls through to row selection.
    """
    if badge is not None:
        return OpenLink(url=badge.url)
    return SelectEntry(slug=row.slug)
