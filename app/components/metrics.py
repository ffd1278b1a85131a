"""Metric cards, stat derivation, and summary strip rendering."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd
import streamlit as st

from pitstops.selection import SelectionState
from pitstops.utils import format_seconds
from pitstops.views import ViewBundle, eligible_rows


@dataclass(frozen=True)
class SummaryStats:
    pit_stops: int
    circuits: int
    constructors: int
    mean_stop_str: str
    fastest_team_str: str
    fastest_team_value: str
    seasons_str: str
    selection_str: str


def derive_summary_stats(records: pd.DataFrame, views: ViewBundle) -> SummaryStats:
    """Compute the summary strip figures for the records currently in range."""
    valid = eligible_rows(records)
    selection: SelectionState = views.selection

    mean_stop_str = "—"
    if not valid.empty:
        mean_stop_str = format_seconds(valid["duration"].mean())

    fastest_team_str = "—"
    fastest_team_value = ""
    if not views.bar.empty:
        # Bar view is sorted slowest first.
        fastest = views.bar.iloc[-1]
        fastest_team_str = str(fastest["constructor_name"])
        fastest_team_value = format_seconds(fastest["avg_duration"])

    seasons_str = "—"
    if selection.year_range is not None:
        start, end = selection.year_range
        seasons_str = str(start) if start == end else f"{start}–{end}"

    return SummaryStats(
        pit_stops=int(len(valid.index)),
        circuits=int(len(views.globe.index)),
        constructors=int(valid["constructor_name"].nunique()) if not valid.empty else 0,
        mean_stop_str=mean_stop_str,
        fastest_team_str=fastest_team_str,
        fastest_team_value=fastest_team_value,
        seasons_str=seasons_str,
        selection_str=selection.describe(),
    )


def metric_html(
    label: str,
    value: str,
    sub: str = "",
    icon: str = "",
    variant: str = "",
    tooltip: str = "",
) -> str:
    """Generate HTML for a metric card with optional Phosphor icon and color variant."""
    sub_html = f'<div class="metric-sub">{sub}</div>' if sub else ""
    icon_html = f'<div class="metric-icon"><i class="{icon}"></i></div>' if icon else ""
    variant_class = f" {variant}" if variant else ""
    tooltip_html = f'<div class="metric-tooltip">{tooltip}</div>' if tooltip else ""
    tooltip_class = " has-tooltip" if tooltip else ""
    return (
        f'<div class="metric-card{variant_class}{tooltip_class}">'
        f"{icon_html}"
        f'<div class="metric-body">'
        f'<div class="metric-label">{label}</div>'
        f'<div class="metric-value">{value}</div>'
        f"{sub_html}"
        f"</div>"
        f"{tooltip_html}</div>"
    )


def render_summary(stats: SummaryStats) -> None:
    """Render the KPI summary strip."""
    s = stats

    kpi_cards = [
        metric_html(
            "Seasons",
            s.seasons_str,
            icon="ph-bold ph-calendar",
            variant="season",
            tooltip="Year range currently shown",
        ),
        metric_html(
            "Pit Stops",
            f"{s.pit_stops:,}",
            "with a valid duration",
            icon="ph-bold ph-wrench",
            variant="stops",
            tooltip="Pit stops in range that feed the charts",
        ),
        metric_html(
            "Circuits",
            str(s.circuits),
            icon="ph-bold ph-map-pin",
            variant="circuit",
            tooltip="Circuits with at least one timed stop",
        ),
        metric_html(
            "Constructors",
            str(s.constructors),
            icon="ph-bold ph-users-three",
            variant="team",
            tooltip="Teams after merging historical names",
        ),
        metric_html(
            "Mean Stop",
            s.mean_stop_str,
            icon="ph-bold ph-timer",
            variant="timing",
            tooltip="Average pit lane time over all stops in range",
        ),
        metric_html(
            "Quickest Team",
            s.fastest_team_str,
            s.fastest_team_value,
            icon="ph-bold ph-lightning",
            variant="timing",
            tooltip="Lowest average stop in the bar chart",
        ),
        metric_html(
            "Selection",
            s.selection_str,
            icon="ph-bold ph-cursor-click",
            variant="selection",
            tooltip="Active track and constructor filters",
        ),
    ]
    kpi_grid = "\n".join(kpi_cards)

    st.markdown(
        f"""<div class="pit-summary">
<div class="pit-summary-title">Pit Stop Stats</div>
<div class="pit-kpis">
{kpi_grid}
</div>
</div>""",
        unsafe_allow_html=True,
    )
