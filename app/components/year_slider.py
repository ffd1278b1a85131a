"""Season range slider for the time filter."""

from __future__ import annotations

import streamlit as st


def year_range_slider(bounds: tuple[int, int], key: str = "year_range") -> tuple[int, int]:
    """Render an integer range slider over ``bounds``. Returns (start, end)."""
    low, high = bounds
    if low == high:
        st.caption(f"Season {low}")
        return low, high

    start, end = st.slider(
        "Seasons",
        min_value=low,
        max_value=high,
        value=(low, high),
        step=1,
        key=key,
    )
    return int(start), int(end)
