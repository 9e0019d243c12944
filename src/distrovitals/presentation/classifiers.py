"""Score tier and trend direction classification."""

import logging
from dataclasses import dataclass
from enum import Enum

from distrovitals.models.schemas import Trend

logger = logging.getLogger(__name__)


class ScoreTier(str, Enum):
    """Display tier of a 0-100 score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def css_class(self) -> str:
        return f"score-{self.value}"


HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40


def classify_score(score: float) -> ScoreTier:
    """Map a score to its tier: >= 70 high, >= 40 medium, else low."""
    if score >= HIGH_THRESHOLD:
        return ScoreTier.HIGH
    elif score >= MEDIUM_THRESHOLD:
        return ScoreTier.MEDIUM
    else:
        return ScoreTier.LOW


@dataclass(frozen=True)
class TrendDisplay:
    """Glyph and style key for a trend value."""

    trend: Trend
    glyph: str
    style: str


_TREND_DISPLAYS = {
    Trend.UP: TrendDisplay(Trend.UP, "↑", "trend-up"),
    Trend.DOWN: TrendDisplay(Trend.DOWN, "↓", "trend-down"),
    Trend.STABLE: TrendDisplay(Trend.STABLE, "→", "trend-stable"),
}


def classify_trend(trend: str | None) -> TrendDisplay:
    """Map a trend value to its display; unknown or missing values read as stable."""
    try:
        return _TREND_DISPLAYS[Trend(trend)]
    except ValueError:
        return _TREND_DISPLAYS[Trend.STABLE]


@dataclass(frozen=True)
class ScoreBar:
    """A score rendered as text plus a proportional bar."""

    label: str
    score: float
    tier: ScoreTier

    @property
    def text(self) -> str:
        return f"{self.score:.1f}"

    @property
    def width_percent(self) -> float:
        """Bar fill width; equals the score, never clamped."""
        return self.score


def score_bar(label: str, score: float, owner: str = "") -> ScoreBar:
    """Classify a score into a bar, warning when it falls outside 0-100."""
    if not 0 <= score <= 100:
        logger.warning("%s score out of range for %s: %s", label, owner or "entry", score)
    return ScoreBar(label=label, score=score, tier=classify_score(score))
