from __future__ import annotations

import plotly.graph_objects as go

from pitstops.selection import Emphasis

# Team colours keyed by both historical and normalised constructor names.
CONSTRUCTOR_COLORS = {
    "Toro Rosso": "#0000FF",
    "Mercedes": "#6CD3BF",
    "Red Bull": "#1E5BC6",
    "Ferrari": "#ED1C24",
    "Williams": "#37BEDD",
    "Force India": "#FF80C7",
    "Virgin": "#C82E37",
    "Renault": "#FFD800",
    "McLaren": "#F58020",
    "Sauber": "#006EFF",
    "Lotus": "#FFB800",
    "HRT": "#B2945E",
    "Caterham": "#0B361F",
    "Lotus F1": "#FFB800",
    "Marussia": "#6E0000",
    "Manor Marussia": "#6E0000",
    "Haas F1 Team": "#B6BABD",
    "Haas": "#B6BABD",
    "Racing Point": "#F596C8",
    "Aston Martin": "#2D826D",
    "Alfa Romeo": "#B12039",
    "AlphaTauri": "#4E7C9B",
    "Alpine F1 Team": "#2293D1",
    "Alpine": "#2293D1",
}

FALLBACK_COLOR = "#808080"
DEEMPHASIZED_COLOR = "#D3D3D3"
SELECTED_OUTLINE = "#FFA500"

_GRID = "rgba(255,255,255,0.06)"
_ZEROLINE = "rgba(255,255,255,0.08)"

# No title — HTML captions above each chart handle labelling.
_CHART_LAYOUT = {
    "paper_bgcolor": "rgba(0,0,0,0)",
    "plot_bgcolor": "rgba(0,0,0,0)",
    "font": {"color": "#E8EAED", "size": 14},
    "margin": {"l": 20, "r": 20, "t": 30, "b": 40},
    "hoverlabel": {
        "bgcolor": "#1E2130",
        "font_size": 13,
        "font_color": "#F0F2F5",
        "align": "left",
    },
}


def constructor_color(name: object, emphasis: Emphasis = Emphasis.NEUTRAL) -> str:
    if emphasis is Emphasis.DEEMPHASIZED:
        return DEEMPHASIZED_COLOR
    return CONSTRUCTOR_COLORS.get(str(name), FALLBACK_COLOR)


def _empty_figure(height: int) -> go.Figure:
    figure = go.Figure()
    figure.update_layout(**_CHART_LAYOUT, height=height)
    return figure
