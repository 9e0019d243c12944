"""Tests for number and age formatting."""

import pytest

from distrovitals.presentation.formatting import (
    format_days_ago,
    format_grouped,
    format_number,
    format_score,
)


@pytest.mark.parametrize(
    "num,expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1.0K"),
        (1500, "1.5K"),
        (21500, "21.5K"),
        (2_300_000, "2.3M"),
    ],
)
def test_format_number(num: int, expected: str) -> None:
    assert format_number(num) == expected


def test_format_number_keeps_magnitude_order() -> None:
    assert format_number(999) == "999"
    assert format_number(1500).endswith("K")
    assert format_number(2_300_000).endswith("M")


@pytest.mark.parametrize(
    "days,expected",
    [
        (0, "today"),
        (1, "yesterday"),
        (5, "5 days ago"),
        (7, "1 weeks ago"),
        (10, "1 weeks ago"),
        (29, "4 weeks ago"),
        (40, "1 months ago"),
        (364, "12 months ago"),
        (400, "1 years ago"),
        (800, "2 years ago"),
    ],
)
def test_format_days_ago(days: int, expected: str) -> None:
    assert format_days_ago(days) == expected


def test_format_grouped_uses_thousands_separators() -> None:
    assert format_grouped(1834) == "1,834"
    assert format_grouped(310000) == "310,000"


def test_format_score_one_decimal() -> None:
    assert format_score(72.44) == "72.4"
    assert format_score(0) == "0.0"
