"""Terminal rendering and the interactive dashboard."""

from .dashboard import DistroDashboard, run_dashboard

__all__ = ["DistroDashboard", "run_dashboard"]
