"""Chart builders for the pit stop explorer."""

from ._shared import (
    CONSTRUCTOR_COLORS,
    DEEMPHASIZED_COLOR,
    constructor_color,
)
from .bar import build_bar_chart
from .globe import build_globe_chart, circuit_style, size_legend_values
from .scatter import build_scatter_chart

__all__ = [
    "CONSTRUCTOR_COLORS",
    "DEEMPHASIZED_COLOR",
    "build_bar_chart",
    "build_globe_chart",
    "build_scatter_chart",
    "circuit_style",
    "constructor_color",
    "size_legend_values",
]
