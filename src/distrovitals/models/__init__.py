"""Data models and schemas."""

from distrovitals.models.schemas import (
    ApiEnvelope,
    HealthSnapshot,
    HistoryPoint,
    Metrics,
    RankingCollection,
    RankingEntry,
    Trend,
)

__all__ = [
    "ApiEnvelope",
    "HealthSnapshot",
    "HistoryPoint",
    "Metrics",
    "RankingCollection",
    "RankingEntry",
    "Trend",
]
