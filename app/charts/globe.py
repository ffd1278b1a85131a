from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go
from plotly.colors import sample_colorscale

from pitstops.selection import Emphasis, SelectionState
from pitstops.utils import format_seconds, linear_scale, value_domain

from ._shared import _CHART_LAYOUT, DEEMPHASIZED_COLOR, SELECTED_OUTLINE

GLOBE_CHART_HEIGHT = 520
RADIUS_RANGE = (2.0, 11.0)
SELECTED_RADIUS_FACTOR = 1.25
LEGEND_TITLE = "Average Pit Stop Time"

_GEO_LAYOUT = {
    "projection_type": "mercator",
    "showland": True,
    "landcolor": "#E0E0E0",
    "showcountries": True,
    "countrycolor": "#333333",
    "showocean": True,
    "oceancolor": "rgba(0,0,0,0)",
    "showframe": False,
    "bgcolor": "rgba(0,0,0,0)",
    "lataxis_range": [-60, 75],
}

_LEGEND_LAYOUT = {
    "title": {"text": "Circle size"},
    "orientation": "h",
    "x": 0.0,
    "y": -0.02,
    "yanchor": "top",
    "itemsizing": "trace",
    "bgcolor": "rgba(0,0,0,0)",
}


def circuit_style(
    avg_duration: float,
    domain: tuple[float, float] | None,
    emphasis: Emphasis,
) -> dict[str, object]:
    """Marker radius, fill and outline for one circuit circle."""
    radius = linear_scale(domain, RADIUS_RANGE)(avg_duration)
    if emphasis is Emphasis.EMPHASIZED:
        radius *= SELECTED_RADIUS_FACTOR

    if emphasis is Emphasis.DEEMPHASIZED:
        fill = DEEMPHASIZED_COLOR
    else:
        position = linear_scale(domain, (0.0, 1.0))(avg_duration)
        fill = sample_colorscale("Blues", [min(max(position, 0.0), 1.0)])[0]

    outline = SELECTED_OUTLINE if emphasis is Emphasis.EMPHASIZED else "#000000"
    return {"radius": radius, "fill": fill, "outline": outline}


def size_legend_values(domain: tuple[float, float]) -> list[int]:
    """Rounded minimum, midpoint and maximum of the duration domain."""
    low, high = domain
    return [math.floor(value + 0.5) for value in (low, (low + high) / 2, high)]


def _color_bar_trace(domain: tuple[float, float]) -> go.Scattergeo:
    # No coordinates: the trace only carries the colour scale.
    low, high = domain
    return go.Scattergeo(
        lat=[None],
        lon=[None],
        mode="markers",
        marker={
            "color": [low],
            "colorscale": "Blues",
            "cmin": low,
            "cmax": high,
            "showscale": True,
            "colorbar": {
                "title": {"text": LEGEND_TITLE, "side": "right"},
                "ticksuffix": "s",
                "tickformat": ".1f",
                "nticks": 4,
                "thickness": 12,
                "len": 0.6,
            },
        },
        hoverinfo="skip",
        showlegend=False,
    )


def _size_legend_traces(domain: tuple[float, float]) -> list[go.Scattergeo]:
    traces = []
    for value in size_legend_values(domain):
        style = circuit_style(float(value), domain, Emphasis.NEUTRAL)
        traces.append(
            go.Scattergeo(
                lat=[None],
                lon=[None],
                mode="markers",
                marker={
                    "size": style["radius"] * 2,
                    "color": style["fill"],
                    "line": {"width": 0.5, "color": "#000000"},
                },
                name=f"{value}s",
                legendgroup="size",
                hoverinfo="skip",
                showlegend=True,
            )
        )
    return traces


# ---------------------------------------------------------------------------
# Circuit map — circle size and shade follow the average pit stop
# ---------------------------------------------------------------------------
def build_globe_chart(
    globe_view: pd.DataFrame,
    selection: SelectionState,
) -> go.Figure:
    """One circle per circuit; circle ``i`` is row ``i`` of trace 0.

    Later traces only draw the colour bar and the size legend.
    """
    figure = go.Figure()
    domain = value_domain(globe_view["avg_duration"])

    if not globe_view.empty and domain is not None:
        styles = [
            circuit_style(float(row.avg_duration), domain, selection.track_emphasis(row.circuit_name))
            for row in globe_view.itertuples()
        ]
        hover = [
            f"<b>Track:</b> {row.circuit_name}<br>"
            f"<b>Avg Pit Stop:</b> {format_seconds(row.avg_duration)}<br>"
            + (
                "<b>Click to clear!</b>"
                if row.circuit_name == selection.selected_track
                else "Click <b>track circle</b> to filter!"
            )
            for row in globe_view.itertuples()
        ]
        figure.add_trace(
            go.Scattergeo(
                lat=globe_view["lat"],
                lon=globe_view["lng"],
                mode="markers",
                marker={
                    "size": [s["radius"] * 2 for s in styles],
                    "color": [s["fill"] for s in styles],
                    "line": {"width": 1, "color": [s["outline"] for s in styles]},
                    "opacity": 1.0,
                },
                customdata=globe_view["circuit_name"],
                hovertext=hover,
                hovertemplate="%{hovertext}<extra></extra>",
                showlegend=False,
            )
        )
        figure.add_trace(_color_bar_trace(domain))
        for trace in _size_legend_traces(domain):
            figure.add_trace(trace)

    figure.update_layout(
        **_CHART_LAYOUT,
        geo=_GEO_LAYOUT,
        showlegend=not globe_view.empty,
        legend=_LEGEND_LAYOUT,
        height=GLOBE_CHART_HEIGHT,
    )
    return figure
