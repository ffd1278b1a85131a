from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from pitstops.selection import SelectionState
from pitstops.utils import format_seconds, value_domain

from ._shared import _CHART_LAYOUT, _GRID, _ZEROLINE, _empty_figure, constructor_color

SCATTER_CHART_HEIGHT = 420


# ---------------------------------------------------------------------------
# Pit stop time vs finishing position — one dot per year/track/constructor
# ---------------------------------------------------------------------------
def build_scatter_chart(
    scatter_view: pd.DataFrame,
    selection: SelectionState,
) -> go.Figure:
    # The rows are already narrowed to the selection; the colours stay per team.
    x_domain = value_domain(scatter_view["avg_duration"], zero_based=True, pad=1.0)
    y_domain = value_domain(scatter_view["finishing_position"], zero_based=True, pad=1.0)
    if scatter_view.empty or x_domain is None:
        return _empty_figure(SCATTER_CHART_HEIGHT)

    df = scatter_view.copy()
    hover = [
        f"<b>Constructor:</b> {row.constructor_name}<br>"
        f"<b>Track:</b> {row.circuit_name}<br>"
        f"<b>Year:</b> {row.year}<br>"
        f"<b>Avg Pit Stop:</b> {format_seconds(row.avg_duration)}<br>"
        f"<b>Position:</b> {_position_label(row.finishing_position)}"
        for row in df.itertuples()
    ]

    figure = go.Figure(
        go.Scatter(
            x=df["avg_duration"].astype(float),
            y=df["finishing_position"],
            mode="markers",
            marker={
                "size": 6,
                "color": [constructor_color(name) for name in df["constructor_name"]],
                "line": {"width": 0},
            },
            customdata=df["key"],
            hovertext=hover,
            hovertemplate="%{hovertext}<extra></extra>",
        )
    )

    yaxis = {"gridcolor": _GRID, "zerolinecolor": _ZEROLINE, "nticks": 6}
    if y_domain is not None:
        yaxis["range"] = list(y_domain)

    figure.update_layout(
        **_CHART_LAYOUT,
        xaxis_title="Average Pit Stop Time",
        yaxis_title="Finishing Position",
        xaxis={
            "range": list(x_domain),
            "nticks": 6,
            "tickformat": ".1f",
            "ticksuffix": "s",
            "gridcolor": _GRID,
            "zerolinecolor": _ZEROLINE,
        },
        yaxis=yaxis,
        showlegend=False,
        height=SCATTER_CHART_HEIGHT,
    )
    return figure


def _position_label(value: object) -> str:
    if value is None or pd.isna(value):
        return "—"
    return str(int(value))
