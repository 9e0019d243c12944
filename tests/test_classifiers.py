"""Tests for score tiers and trend display."""

import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from distrovitals.presentation.classifiers import (
    ScoreTier,
    classify_score,
    classify_trend,
    score_bar,
)


@given(score=st.floats(allow_nan=False, allow_infinity=True))
@settings(max_examples=200)
def test_classify_score_partitions_the_real_line(score: float) -> None:
    """Every score lands in exactly one of <40, [40, 70), >=70."""
    tier = classify_score(score)
    expected = [
        tier_
        for tier_, matches in (
            (ScoreTier.LOW, score < 40),
            (ScoreTier.MEDIUM, 40 <= score < 70),
            (ScoreTier.HIGH, score >= 70),
        )
        if matches
    ]
    assert expected == [tier]


@pytest.mark.parametrize(
    "score,tier",
    [(0, ScoreTier.LOW), (39.99, ScoreTier.LOW), (40, ScoreTier.MEDIUM),
     (69.99, ScoreTier.MEDIUM), (70, ScoreTier.HIGH), (100, ScoreTier.HIGH)],
)
def test_classify_score_boundaries(score: float, tier: ScoreTier) -> None:
    assert classify_score(score) is tier


def test_tier_css_class() -> None:
    assert ScoreTier.HIGH.css_class == "score-high"


@pytest.mark.parametrize(
    "trend,glyph,style",
    [
        ("up", "↑", "trend-up"),
        ("down", "↓", "trend-down"),
        ("stable", "→", "trend-stable"),
        ("unknown", "→", "trend-stable"),
        ("", "→", "trend-stable"),
        (None, "→", "trend-stable"),
    ],
)
def test_classify_trend(trend, glyph: str, style: str) -> None:
    display = classify_trend(trend)
    assert display.glyph == glyph
    assert display.style == style


def test_score_bar_width_equals_score() -> None:
    bar = score_bar("Overall", 72.4)
    assert bar.tier is ScoreTier.HIGH
    assert bar.width_percent == 72.4
    assert bar.text == "72.4"


def test_score_bar_out_of_range_is_not_clamped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="distrovitals.presentation.classifiers"):
        bar = score_bar("Community Engagement", 104.2, "gentoo")

    assert bar.width_percent == 104.2
    assert "gentoo" in caplog.text
