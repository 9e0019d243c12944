"""Shared fixtures for distrovitals tests."""

import pytest

from distrovitals.models.schemas import RankingEntry


def make_entry(slug: str = "debian", **overrides) -> RankingEntry:
    """Build a ranking entry with sensible defaults."""
    data = {
        "slug": slug,
        "name": slug.title(),
        "overall_score": 72.4,
        "development_score": 80.0,
        "community_score": 65.5,
        "maintenance_score": 68.0,
        "trend": "up",
    }
    data.update(overrides)
    return RankingEntry.model_validate(data)


def make_collection(count: int, with_rank: bool = False) -> list[RankingEntry]:
    """`count` entries in descending score order, slugs distro-1..distro-N."""
    return [
        make_entry(
            f"distro-{i}",
            overall_score=100 - i * 100 / (count + 1),
            rank=i if with_rank else None,
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def entry() -> RankingEntry:
    return make_entry(
        "arch",
        name="Arch Linux",
        github_org="archlinux",
        subreddit="archlinux",
        description="A simple, lightweight distribution",
        metrics={
            "total_contributors": 1260,
            "commits_30d": 1834,
            "commits_365d": 21900,
            "releases_30d": 2,
            "total_releases": 140,
            "total_stars": 15300,
            "total_forks": 2100,
            "open_issues": 310,
            "open_prs": 45,
            "latest_release": "2026.10.01",
            "days_since_release": 18,
            "reddit_subscribers": 310000,
        },
    )


def envelope(data=None, success: bool = True, error: str | None = None) -> dict:
    """Backend response wrapper."""
    return {"success": success, "data": data, "error": error}
