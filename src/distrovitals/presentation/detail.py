"""View model for a single distribution's detail page."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from distrovitals.models.schemas import HealthSnapshot, HistoryPoint, Metrics, RankingEntry
from distrovitals.presentation.badges import BadgeSet, compose_badges
from distrovitals.presentation.classifiers import ScoreBar, TrendDisplay, classify_trend, score_bar
from distrovitals.presentation.formatting import format_days_ago, format_number, format_score
from distrovitals.presentation.history import Sparkline, build_sparkline

NO_HISTORY_MESSAGE = "No historical data available yet."


@dataclass(frozen=True)
class MetricCard:
    value: str
    label: str


@dataclass(frozen=True)
class LatestRelease:
    tag: str
    age: str | None = None


@dataclass(frozen=True)
class MethodologySection:
    title: str
    text: str


@dataclass(frozen=True)
class Methodology:
    """Collapsible explanation of how the overall score is built.

    Collapsed by default. Toggling it is local to the panel and does not
    touch the dashboard's ViewState.
    """

    title: str
    formula: str
    sections: tuple[MethodologySection, ...]
    note: str
    collapsed: bool = True

    def toggled(self) -> "Methodology":
        return replace(self, collapsed=not self.collapsed)


@dataclass(frozen=True)
class DetailHeader:
    name: str
    trend: TrendDisplay
    trend_text: str
    overall: ScoreBar


@dataclass(frozen=True)
class DetailView:
    """Everything needed to draw the detail page of one distribution."""

    slug: str
    header: DetailHeader
    badges: BadgeSet
    metrics: tuple[MetricCard, ...]
    latest_release: LatestRelease | None
    breakdown: tuple[ScoreBar, ...]
    sparkline: Sparkline | None
    history_message: str | None
    methodology: Methodology
    description: str | None = None
    health: HealthSnapshot | None = field(default=None, compare=False)


def metric_cards(m: Metrics) -> tuple[MetricCard, ...]:
    """The flat metrics grid, every counter zero-defaulted."""
    return (
        MetricCard(format_number(m.total_contributors), "Contributors"),
        MetricCard(format_number(m.commits_30d), "Commits (30d)"),
        MetricCard(format_number(m.commits_365d), "Commits (365d)"),
        MetricCard(str(m.releases_30d), "Releases (30d)"),
        MetricCard(format_number(m.total_stars), "Stars"),
        MetricCard(format_number(m.total_forks), "Forks"),
        MetricCard(format_number(m.open_issues), "Open Issues"),
        MetricCard(format_number(m.open_prs), "Open PRs"),
        MetricCard(str(m.total_releases), "Total Releases"),
        MetricCard(format_number(m.reddit_subscribers), "Reddit Subscribers"),
    )


def latest_release(m: Metrics) -> LatestRelease | None:
    if not m.latest_release:
        return None
    age = format_days_ago(m.days_since_release) if m.days_since_release is not None else None
    return LatestRelease(tag=m.latest_release, age=age)


def score_breakdown(entry: RankingEntry) -> tuple[ScoreBar, ...]:
    """Development, community and maintenance bars, as supplied upstream."""
    return (
        score_bar("Development Activity", entry.development_score, entry.slug),
        score_bar("Community Engagement", entry.community_score, entry.slug),
        score_bar("Maintenance Health", entry.maintenance_score, entry.slug),
    )


def methodology(entry: RankingEntry) -> Methodology:
    if entry.subreddit:
        reddit = f"Reddit data from r/{entry.subreddit}."
    else:
        reddit = "No Reddit data available."
    return Methodology(
        title="How This Score Is Calculated",
        formula="Overall Score = Development (40%) + Community (30%) + Maintenance (30%)",
        sections=(
            MethodologySection(
                f"Development Activity ({format_score(entry.development_score)})",
                "Based on commits and contributors in the last 30 days from GitHub repositories.",
            ),
            MethodologySection(
                f"Community Engagement ({format_score(entry.community_score)})",
                "Combines GitHub popularity (stars, forks) with Reddit community size "
                f"and activity. {reddit}",
            ),
            MethodologySection(
                f"Maintenance Health ({format_score(entry.maintenance_score)})",
                "Measures open issues, open PRs, and recency of last commit. "
                "Lower backlogs = higher scores.",
            ),
        ),
        note=(
            "Note: Not all distros develop on GitHub. Scores reflect GitHub/Reddit "
            "presence, not overall project quality."
        ),
    )


def compose_detail(
    entry: RankingEntry,
    health: HealthSnapshot | None = None,
    history: Sequence[HistoryPoint] | None = None,
) -> DetailView:
    """Merge a ranking entry with optional live health and history data.

    Args:
        entry: The selected ranking entry.
        health: Latest health snapshot, or None if unavailable.
        history: Score history oldest first, or None if unavailable.

    Returns:
        DetailView. Missing optional inputs only reduce its content: without
        history the chart is replaced by a "no historical data" message, and
        a single-point history draws neither.
    """
    m = entry.metrics_or_empty
    trend = classify_trend(entry.trend)
    return DetailView(
        slug=entry.slug,
        header=DetailHeader(
            name=entry.name,
            trend=trend,
            trend_text=f"{trend.glyph} {entry.trend}",
            overall=score_bar("Overall", entry.overall_score, entry.slug),
        ),
        badges=compose_badges(entry, detailed=True),
        metrics=metric_cards(m),
        latest_release=latest_release(m),
        breakdown=score_breakdown(entry),
        sparkline=build_sparkline(history),
        history_message=None if history else NO_HISTORY_MESSAGE,
        methodology=methodology(entry),
        description=entry.description,
        health=health,
    )
