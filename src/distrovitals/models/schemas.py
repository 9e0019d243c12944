"""Pydantic models for DistroVitals API payloads."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Trend(str, Enum):
    """Direction of recent score change."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ApiEnvelope(BaseModel):
    """Response wrapper used by every backend endpoint."""

    success: bool = False
    data: Any = None
    error: str | None = None


class Metrics(BaseModel):
    """Raw counters aggregated by the backend for a distribution."""

    model_config = ConfigDict(extra="ignore")

    repos_tracked: int = 0
    total_stars: int = 0
    total_forks: int = 0
    total_contributors: int = 0
    commits_30d: int = 0
    commits_365d: int = 0
    open_issues: int = 0
    open_prs: int = 0
    total_releases: int = 0
    releases_30d: int = 0
    latest_release: str | None = None
    days_since_release: int | None = None
    # Reddit metrics
    reddit_subscribers: int = 0
    reddit_posts_30d: int = 0

    @field_validator(
        "repos_tracked",
        "total_stars",
        "total_forks",
        "total_contributors",
        "commits_30d",
        "commits_365d",
        "open_issues",
        "open_prs",
        "total_releases",
        "releases_30d",
        "reddit_subscribers",
        "reddit_posts_30d",
        mode="before",
    )
    @classmethod
    def _null_counter_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class RankingEntry(BaseModel):
    """One distribution's scored summary row."""

    model_config = ConfigDict(extra="ignore")

    slug: str
    name: str
    rank: int | None = None
    overall_score: float = 0.0
    development_score: float = 0.0
    community_score: float = 0.0
    maintenance_score: float = 0.0
    trend: str = Trend.STABLE.value  # backend may also send "unknown"
    github_org: str | None = None
    subreddit: str | None = None
    description: str | None = None
    metrics: Metrics | None = None

    @property
    def metrics_or_empty(self) -> Metrics:
        """Metrics with every counter zero-defaulted."""
        return self.metrics or Metrics()


class HealthSnapshot(BaseModel):
    """Latest computed health score for a distribution."""

    model_config = ConfigDict(extra="ignore")

    overall_score: float
    development_score: float = 0.0
    community_score: float = 0.0
    maintenance_score: float = 0.0
    trend: str = Trend.STABLE.value
    calculated_at: datetime | None = None


class HistoryPoint(BaseModel):
    """One historical health score, oldest first in a series."""

    model_config = ConfigDict(extra="ignore")

    overall_score: float
    development_score: float | None = None
    community_score: float | None = None
    maintenance_score: float | None = None
    trend: str | None = None
    calculated_at: datetime | None = None


RankingCollection = list[RankingEntry]

