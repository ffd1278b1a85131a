from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from pitstops.selection import SelectionState
from pitstops.utils import format_seconds, value_domain

from ._shared import _CHART_LAYOUT, _GRID, _ZEROLINE, _empty_figure, constructor_color

BAR_CHART_HEIGHT = 420


# ---------------------------------------------------------------------------
# Average pit stop per constructor — horizontal bars, slowest on top
# ---------------------------------------------------------------------------
def build_bar_chart(
    bar_view: pd.DataFrame,
    selection: SelectionState,
) -> go.Figure:
    """One bar per constructor; bar ``i`` is row ``i`` of ``bar_view``."""
    domain = value_domain(bar_view["avg_duration"], zero_based=True)
    if bar_view.empty or domain is None:
        return _empty_figure(BAR_CHART_HEIGHT)

    names = bar_view["constructor_name"].astype(str).tolist()
    values = bar_view["avg_duration"].astype(float).tolist()
    colors = [constructor_color(name, selection.constructor_emphasis(name)) for name in names]
    hover = [
        f"<b>Constructor:</b> {name}<br>"
        f"<b>Avg Pit Stop:</b> {format_seconds(value)}<br>"
        + (
            "<b>Click to clear!</b>"
            if name == selection.selected_constructor
            else "Click <b>bar</b> to filter!"
        )
        for name, value in zip(names, values)
    ]

    figure = go.Figure(
        go.Bar(
            x=values,
            y=names,
            orientation="h",
            marker={"color": colors, "line": {"width": 0}},
            customdata=names,
            hovertext=hover,
            hovertemplate="%{hovertext}<extra></extra>",
        )
    )

    figure.update_layout(
        **_CHART_LAYOUT,
        xaxis_title="Average Pit Stop Time",
        xaxis={
            "range": list(domain),
            "nticks": 6,
            "tickformat": ".1f",
            "ticksuffix": "s",
            "gridcolor": _GRID,
            "zerolinecolor": _ZEROLINE,
        },
        yaxis={
            "autorange": "reversed",
            "gridcolor": _GRID,
            "automargin": True,
        },
        bargap=0.1,
        showlegend=False,
        height=max(len(names) * 26 + 90, BAR_CHART_HEIGHT),
    )
    return figure
