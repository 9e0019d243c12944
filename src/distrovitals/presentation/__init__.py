"""Presentation pipeline: rankings payload to renderer-neutral view models."""

from distrovitals.presentation.badges import Badge, BadgeSet, compose_badges
from distrovitals.presentation.classifiers import ScoreTier, classify_score, classify_trend
from distrovitals.presentation.detail import DetailView, compose_detail
from distrovitals.presentation.formatting import format_days_ago, format_number
from distrovitals.presentation.history import Sparkline, build_sparkline, project_history
from distrovitals.presentation.pagination import PAGE_SIZE, Paginator
from distrovitals.presentation.rankings import RankingRow, RankingView, build_ranking_view
from distrovitals.presentation.state import ViewState, back_to_list, find_entry, go_to_page, select_entry

__all__ = [
    "PAGE_SIZE",
    "Badge",
    "BadgeSet",
    "DetailView",
    "Paginator",
    "RankingRow",
    "RankingView",
    "ScoreTier",
    "Sparkline",
    "ViewState",
    "back_to_list",
    "build_ranking_view",
    "build_sparkline",
    "classify_score",
    "classify_trend",
    "compose_badges",
    "compose_detail",
    "find_entry",
    "format_days_ago",
    "format_number",
    "go_to_page",
    "project_history",
    "select_entry",
]
