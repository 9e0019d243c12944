"""External data-source badges (GitHub org, subreddit) for a ranking entry."""

from dataclasses import dataclass, field
from enum import Enum

from distrovitals.models.schemas import RankingEntry
from distrovitals.presentation.formatting import format_grouped, format_number

NO_SOURCES_PLACEHOLDER = "No data sources configured"


class BadgeSource(str, Enum):
    """Where a badge links to."""

    GITHUB = "github"
    REDDIT = "reddit"


@dataclass(frozen=True)
class Badge:
    """A clickable indicator linking to an external data source."""

    source: BadgeSource
    label: str
    url: str
    tooltip: str


@dataclass(frozen=True)
class BadgeSet:
    """Badges for one entry, GitHub first, plus the empty-state placeholder."""

    badges: tuple[Badge, ...] = field(default_factory=tuple)
    detailed: bool = False

    @property
    def placeholder(self) -> str | None:
        """Text to show instead of badges; only detailed sets have one."""
        if self.badges or not self.detailed:
            return None
        return NO_SOURCES_PLACEHOLDER

    def __bool__(self) -> bool:
        return bool(self.badges)


def _github_badge(entry: RankingEntry, detailed: bool) -> Badge:
    org = entry.github_org
    m = entry.metrics_or_empty
    c30 = format_number(m.commits_30d)
    c365 = format_number(m.commits_365d)
    label = f"{org} ({c30}/30d, {c365}/yr)" if detailed else f"{c30}/30d · {c365}/yr"
    return Badge(
        source=BadgeSource.GITHUB,
        label=label,
        url=f"https://github.com/{org}",
        tooltip=(
            f"GitHub: {org} - {format_grouped(m.commits_30d)} commits (30 days), "
            f"{format_grouped(m.commits_365d)} commits (year)"
        ),
    )


def _reddit_badge(entry: RankingEntry, detailed: bool) -> Badge:
    sub = entry.subreddit
    subscribers = entry.metrics_or_empty.reddit_subscribers
    formatted = format_number(subscribers)
    return Badge(
        source=BadgeSource.REDDIT,
        label=f"r/{sub} ({formatted})" if detailed else formatted,
        url=f"https://reddit.com/r/{sub}",
        tooltip=f"Reddit: r/{sub} - {format_grouped(subscribers)} subscribers",
    )


def compose_badges(entry: RankingEntry, detailed: bool = False) -> BadgeSet:
    """Build the badge set for an entry.

    Args:
        entry: Ranking entry whose `github_org` / `subreddit` select the badges.
        detailed: Use the long labels of the detail view. Detailed sets also
            carry a placeholder when no source is configured.

    Returns:
        BadgeSet with zero, one or two badges.
    """
    badges = []
    if entry.github_org:
        badges.append(_github_badge(entry, detailed))
    if entry.subreddit:
        badges.append(_reddit_badge(entry, detailed))
    return BadgeSet(badges=tuple(badges), detailed=detailed)
