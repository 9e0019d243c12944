"""Tests for the detail view composer."""

from conftest import make_entry

from distrovitals.models.schemas import HealthSnapshot, HistoryPoint
from distrovitals.presentation.classifiers import ScoreTier
from distrovitals.presentation.detail import NO_HISTORY_MESSAGE, compose_detail


def _history(*scores: float) -> list[HistoryPoint]:
    return [HistoryPoint(overall_score=s) for s in scores]


def test_full_detail(entry) -> None:
    health = HealthSnapshot(overall_score=72.4, trend="up")

    view = compose_detail(entry, health, _history(70.0, 71.2, 72.4))

    assert view.header.name == "Arch Linux"
    assert view.header.trend_text == "↑ up"
    assert view.header.overall.text == "72.4"
    assert view.header.overall.tier is ScoreTier.HIGH
    assert [b.label for b in view.badges.badges] == [
        "archlinux (1.8K/30d, 21.9K/yr)",
        "r/archlinux (310.0K)",
    ]
    assert view.sparkline is not None
    assert view.history_message is None
    assert view.health is health
    assert view.description == "A simple, lightweight distribution"


def test_metrics_grid(entry) -> None:
    cards = {card.label: card.value for card in compose_detail(entry).metrics}

    assert cards == {
        "Contributors": "1.3K",
        "Commits (30d)": "1.8K",
        "Commits (365d)": "21.9K",
        "Releases (30d)": "2",
        "Stars": "15.3K",
        "Forks": "2.1K",
        "Open Issues": "310",
        "Open PRs": "45",
        "Total Releases": "140",
        "Reddit Subscribers": "310.0K",
    }


def test_metrics_grid_zero_defaults_without_metrics() -> None:
    view = compose_detail(make_entry())

    assert all(card.value == "0" for card in view.metrics)
    assert view.latest_release is None


def test_latest_release_line(entry) -> None:
    release = compose_detail(entry).latest_release

    assert release.tag == "2026.10.01"
    assert release.age == "2 weeks ago"


def test_latest_release_without_age() -> None:
    entry = make_entry(metrics={"latest_release": "24.04", "days_since_release": None})

    release = compose_detail(entry).latest_release

    assert release.tag == "24.04"
    assert release.age is None


def test_released_today() -> None:
    entry = make_entry(metrics={"latest_release": "v1", "days_since_release": 0})

    assert compose_detail(entry).latest_release.age == "today"


def test_breakdown_bars(entry) -> None:
    bars = compose_detail(entry).breakdown

    assert [(b.label, b.text, b.tier) for b in bars] == [
        ("Development Activity", "80.0", ScoreTier.HIGH),
        ("Community Engagement", "65.5", ScoreTier.MEDIUM),
        ("Maintenance Health", "68.0", ScoreTier.MEDIUM),
    ]
    assert [b.width_percent for b in bars] == [80.0, 65.5, 68.0]


def test_missing_optional_data_reduces_content(entry) -> None:
    view = compose_detail(entry, None, None)

    assert view.sparkline is None
    assert view.history_message == NO_HISTORY_MESSAGE
    assert view.health is None
    assert len(view.breakdown) == 3


def test_empty_history_shows_message(entry) -> None:
    view = compose_detail(entry, history=[])

    assert view.sparkline is None
    assert view.history_message == NO_HISTORY_MESSAGE


def test_single_point_history_draws_nothing(entry) -> None:
    view = compose_detail(entry, history=_history(70.0))

    assert view.sparkline is None
    assert view.history_message is None


def test_methodology_collapsed_and_toggles_locally(entry) -> None:
    view = compose_detail(entry)
    panel = view.methodology

    assert panel.collapsed
    assert panel.formula == "Overall Score = Development (40%) + Community (30%) + Maintenance (30%)"
    assert [s.title for s in panel.sections] == [
        "Development Activity (80.0)",
        "Community Engagement (65.5)",
        "Maintenance Health (68.0)",
    ]
    assert "Reddit data from r/archlinux." in panel.sections[1].text

    expanded = panel.toggled()
    assert not expanded.collapsed
    assert expanded.toggled() == panel
    assert view.methodology.collapsed


def test_methodology_without_subreddit() -> None:
    panel = compose_detail(make_entry()).methodology

    assert "No Reddit data available." in panel.sections[1].text


def test_detail_placeholder_without_sources() -> None:
    view = compose_detail(make_entry())

    assert view.badges.placeholder == "No data sources configured"


def test_unknown_trend_is_shown_as_stable() -> None:
    view = compose_detail(make_entry(trend="unknown"))

    assert view.header.trend.style == "trend-stable"
    assert view.header.trend_text == "→ unknown"
