"""Translate Plotly selection events into clicked view-row keys."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd


def event_points(event: object) -> list[Mapping]:
    """Return the selected points of a ``st.plotly_chart`` event, or ``[]``."""
    if not event:
        return []
    try:
        selection = event["selection"]
        points = selection["points"]
    except (KeyError, TypeError):
        return []
    return list(points or [])


def clicked_key(point: Mapping, view: pd.DataFrame, key_column: str) -> str | None:
    """Map one selected point back to the key of the view row it was drawn from."""
    custom = point.get("customdata")
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    if custom is not None and not (isinstance(custom, float) and pd.isna(custom)):
        return str(custom)

    index = point.get("point_index", point.get("point_number"))
    if index is None or view.empty:
        return None
    index = int(index)
    if not 0 <= index < len(view.index):
        return None
    return str(view.iloc[index][key_column])


class ClickTracker:
    """Remember the last selection payload per chart so reruns don't replay a click.

    Streamlit reports the same selection again on every rerun until the user
    clicks something else. A changed, non-empty payload is a click on its key.
    A payload that empties after a click is a second click on the same point,
    reported as that point's key while it is still ``selected``.
    """

    def __init__(self) -> None:
        self._last: dict[str, tuple] = {}
        self._keys: dict[str, str | None] = {}

    def consume(
        self,
        chart: str,
        points: Sequence[Mapping],
        view: pd.DataFrame,
        key_column: str,
        selected: str | None = None,
    ) -> str | None:
        signature = tuple(
            (
                p.get("curve_number"),
                p.get("point_index", p.get("point_number")),
                clicked_key(p, view, key_column),
            )
            for p in points
        )
        previous = self._last.get(chart, ())
        self._last[chart] = signature
        if signature == previous:
            return None

        if not points:
            last_key = self._keys.pop(chart, None)
            if last_key is not None and last_key == selected:
                return last_key
            return None

        key = signature[-1][2]
        self._keys[chart] = key
        return key
