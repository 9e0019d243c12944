"""Projection of a score history onto sparkline coordinates."""

from collections.abc import Sequence
from dataclasses import dataclass

from distrovitals.models.schemas import HistoryPoint

CHART_TITLE = "30-Day Trend"


def project_history(points: Sequence[HistoryPoint]) -> list[tuple[float, float]]:
    """Map a history onto a 0-100 plotting space.

    x is spread evenly from 0 to 100 across the series; y is `100 - score`
    so that higher scores plot higher on screen. Series shorter than two
    points cannot be charted and give an empty list.
    """
    length = len(points)
    if length < 2:
        return []
    return [
        (i / (length - 1) * 100, 100 - point.overall_score)
        for i, point in enumerate(points)
    ]


def _coord(value: float) -> str:
    return f"{value:.10g}"


@dataclass(frozen=True)
class Sparkline:
    """Trend chart for the detail view: one polyline vertex per history entry."""

    coordinates: tuple[tuple[float, float], ...]
    title: str = CHART_TITLE

    @property
    def points(self) -> str:
        """Coordinates as an SVG `points` attribute value."""
        return " ".join(f"{_coord(x)},{_coord(y)}" for x, y in self.coordinates)

    @property
    def scores(self) -> list[float]:
        """Scores recovered from the inverted y axis."""
        return [100 - y for _, y in self.coordinates]


def build_sparkline(points: Sequence[HistoryPoint] | None) -> Sparkline | None:
    """Sparkline for a history, or None when there is nothing to chart."""
    coordinates = project_history(points or [])
    if not coordinates:
        return None
    return Sparkline(coordinates=tuple(coordinates))
