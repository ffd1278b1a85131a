"""Reusable UI components for the pit stop explorer."""

from .metrics import derive_summary_stats, metric_html, render_summary
from .selection_events import ClickTracker, clicked_key, event_points
from .year_slider import year_range_slider

__all__ = [
    "ClickTracker",
    "clicked_key",
    "derive_summary_stats",
    "event_points",
    "metric_html",
    "render_summary",
    "year_range_slider",
]
