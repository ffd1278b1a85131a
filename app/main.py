from __future__ import annotations

import logging

import streamlit as st
from data_access import get_record_table

from pitstops.config import configure_logging, get_settings
from pitstops.coordinator import DashboardCoordinator
from pitstops.extract import DataLoadError
from pitstops.selection import SelectionPhase

st.set_page_config(page_title="F1 Pit Stop Explorer", page_icon="🏎️", layout="wide")

from charts import build_bar_chart, build_globe_chart, build_scatter_chart  # noqa: E402
from components import (  # noqa: E402
    ClickTracker,
    derive_summary_stats,
    event_points,
    render_summary,
    year_range_slider,
)
from theme import inject_theme  # noqa: E402

configure_logging(get_settings())
logger = logging.getLogger(__name__)

inject_theme()

_BAR_KEY = "bar_chart"
_GLOBE_KEY = "globe_chart"


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------
st.markdown(
    '<div style="padding:0.2rem 0 0.6rem 0;">'
    '<span style="font-size:2.5rem;font-weight:900;'
    'color:#E10600;letter-spacing:0.05em;margin-right:0.4rem;">F1</span>'
    '<span style="font-size:1.6rem;font-weight:600;color:#E5E7EB;">'
    "Pit Stop Explorer</span></div>",
    unsafe_allow_html=True,
)


# ---------------------------------------------------------------------------
# Load record table
# ---------------------------------------------------------------------------
try:
    records = get_record_table()
except DataLoadError as exc:
    logger.error("Pit stop data failed to load: %s", exc)
    st.error(
        "Pit stop data could not be loaded.\n\n"
        f"{exc}\n\n"
        "Set `PITSTOPS_CSV_PATH` to the results/pit stops CSV and reload."
    )
    st.stop()

if records.empty:
    st.warning("The pit stop file has no rows.")
    st.stop()

if "coordinator" not in st.session_state:
    st.session_state["coordinator"] = DashboardCoordinator(records)
    st.session_state["click_tracker"] = ClickTracker()

coordinator: DashboardCoordinator = st.session_state["coordinator"]
tracker: ClickTracker = st.session_state["click_tracker"]


# ---------------------------------------------------------------------------
# Dispatch clicks from the charts drawn on the previous run
# ---------------------------------------------------------------------------
drawn = coordinator.views
constructor_click = tracker.consume(
    _BAR_KEY,
    event_points(st.session_state.get(_BAR_KEY)),
    drawn.bar,
    "constructor_name",
    selected=drawn.selection.selected_constructor,
)
if constructor_click is not None:
    coordinator.click_constructor(constructor_click)

track_click = tracker.consume(
    _GLOBE_KEY,
    event_points(st.session_state.get(_GLOBE_KEY)),
    drawn.globe,
    "circuit_name",
    selected=coordinator.selection.selected_track,
)
if track_click is not None:
    coordinator.click_track(track_click)


# ---------------------------------------------------------------------------
# Controls row — season range + clear
# ---------------------------------------------------------------------------
full_range = coordinator.full_year_range
if full_range is None:
    st.warning("No pit stop carries a valid year.")
    st.stop()

_slider_col, _clear_col = st.columns([5, 1])
with _slider_col:
    start_year, end_year = year_range_slider(full_range)
with _clear_col:
    st.write("")
    if st.button(
        "Clear selection",
        disabled=coordinator.selection.phase is SelectionPhase.IDLE,
        use_container_width=True,
    ):
        coordinator.clear_all()

coordinator.set_year_range(start_year, end_year)
views = coordinator.views

render_summary(derive_summary_stats(coordinator.records, views))


# ---------------------------------------------------------------------------
# Linked charts
# ---------------------------------------------------------------------------
_bar_col, _scatter_col = st.columns(2)

with _bar_col:
    st.markdown(
        '<p class="section-header first">Average Pit Stop by Constructor</p>',
        unsafe_allow_html=True,
    )
    track_note = (
        f" at <b>{views.selection.selected_track}</b>"
        if views.selection.selected_track is not None
        else ""
    )
    st.markdown(
        '<p class="chart-caption">'
        f"Mean time in the pit lane per team{track_note}, slowest at the top. "
        "Click a bar to show only that team in the scatter plot; "
        "click it again to clear.</p>",
        unsafe_allow_html=True,
    )
    st.plotly_chart(
        build_bar_chart(views.bar, views.selection),
        use_container_width=True,
        key=_BAR_KEY,
        on_select="rerun",
        selection_mode="points",
    )

with _scatter_col:
    st.markdown(
        '<p class="section-header first">Pit Stop Time vs Finishing Position</p>',
        unsafe_allow_html=True,
    )
    st.markdown(
        '<p class="chart-caption">'
        "Each dot is one team at one race: its average stop against where it finished. "
        "Follows both the track and the constructor selection.</p>",
        unsafe_allow_html=True,
    )
    st.plotly_chart(build_scatter_chart(views.scatter, views.selection), use_container_width=True)

st.markdown(
    '<p class="section-header">Circuits</p>',
    unsafe_allow_html=True,
)
st.markdown(
    '<p class="chart-caption">'
    "Larger, darker circles mean slower average stops. "
    "Click a circuit to focus the bar chart and scatter plot on it; "
    "click it again to clear the track and constructor selection.</p>",
    unsafe_allow_html=True,
)
st.plotly_chart(
    build_globe_chart(views.globe, views.selection),
    use_container_width=True,
    key=_GLOBE_KEY,
    on_select="rerun",
    selection_mode="points",
)

# ---------------------------------------------------------------------------
# Footer
# ---------------------------------------------------------------------------
st.markdown(
    '<div class="app-footer">Data from the Ergast F1 archive &middot; '
    "Built with Streamlit and Plotly</div>",
    unsafe_allow_html=True,
)
