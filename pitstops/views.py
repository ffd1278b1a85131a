from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from pitstops.selection import SelectionState
from pitstops.utils import make_group_key

REQUIRED_COLUMNS = ["duration", "position", "season", "track", "year", "constructor_name"]
NUMERIC_COLUMNS = ["duration", "position", "year"]
OPTIONAL_COLUMNS = ["circuit_name", "position_order", "lat", "lng"]

BAR_COLUMNS = ["constructor_name", "avg_duration"]
SCATTER_COLUMNS = [
    "key",
    "avg_duration",
    "finishing_position",
    "constructor_name",
    "circuit_name",
    "year",
]
GLOBE_COLUMNS = ["circuit_name", "avg_duration", "lat", "lng"]


@dataclass(frozen=True)
class ViewBundle:
    bar: pd.DataFrame
    scatter: pd.DataFrame
    globe: pd.DataFrame
    selection: SelectionState


def _empty(columns: list[str]) -> pd.DataFrame:
    return pd.DataFrame(columns=columns)


def _first(values: pd.Series) -> object:
    return values.iloc[0]


def eligible_rows(records: pd.DataFrame) -> pd.DataFrame:
    """Drop rows missing a required field or carrying a non-numeric duration/position/year."""
    if records.empty or any(col not in records.columns for col in REQUIRED_COLUMNS):
        return records.iloc[0:0].copy()

    df = records.copy()
    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    mask = df[REQUIRED_COLUMNS].notna().all(axis=1)
    for col in NUMERIC_COLUMNS:
        parsed = pd.to_numeric(df[col], errors="coerce")
        mask &= parsed.notna()
        df[col] = parsed

    df = df[mask].copy()
    df["year"] = df["year"].astype(int)
    return df


def _restrict(
    df: pd.DataFrame,
    track: str | None = None,
    constructor: str | None = None,
) -> pd.DataFrame:
    if track is not None:
        df = df[df["circuit_name"] == track]
    if constructor is not None:
        df = df[df["constructor_name"] == constructor]
    return df


def build_bar_view(
    records: pd.DataFrame, selection: SelectionState | None = None
) -> pd.DataFrame:
    """Average pit-stop time per constructor, slowest first.

    Only the track selection narrows the rows; the constructor selection is left
    to the chart's styling so every constructor at the track stays clickable.
    """
    selection = selection or SelectionState()
    df = _restrict(eligible_rows(records), track=selection.selected_track)
    if df.empty:
        return _empty(BAR_COLUMNS)

    out = df.groupby("constructor_name", sort=False, dropna=False, as_index=False).agg(
        avg_duration=("duration", "mean")
    )
    out = out.sort_values("avg_duration", ascending=False, kind="mergesort")
    return out[BAR_COLUMNS].reset_index(drop=True)


def build_scatter_view(
    records: pd.DataFrame, selection: SelectionState | None = None
) -> pd.DataFrame:
    """One point per (year, circuit, constructor) with its mean stop and finishing position."""
    selection = selection or SelectionState()
    df = _restrict(
        eligible_rows(records),
        track=selection.selected_track,
        constructor=selection.selected_constructor,
    )
    if df.empty:
        return _empty(SCATTER_COLUMNS)

    out = df.groupby(
        ["year", "circuit_name", "constructor_name"], sort=False, dropna=False, as_index=False
    ).agg(
        avg_duration=("duration", "mean"),
        finishing_position=("position_order", _first),
    )
    # A zero mean means the durations were blank in the source, not an instant stop.
    out = out[out["avg_duration"] != 0]
    if out.empty:
        return _empty(SCATTER_COLUMNS)

    out["finishing_position"] = pd.to_numeric(out["finishing_position"], errors="coerce")
    out["key"] = [
        make_group_key(year, circuit, constructor)
        for year, circuit, constructor in zip(
            out["year"], out["circuit_name"], out["constructor_name"]
        )
    ]
    return out[SCATTER_COLUMNS].reset_index(drop=True)


def build_globe_view(
    records: pd.DataFrame, selection: SelectionState | None = None
) -> pd.DataFrame:
    """Average pit-stop time and coordinates per circuit.

    The selection never removes circuits here; it only changes how the map
    styles them.
    """
    df = eligible_rows(records)
    if df.empty:
        return _empty(GLOBE_COLUMNS)

    out = df.groupby("circuit_name", sort=False, dropna=False, as_index=False).agg(
        avg_duration=("duration", "mean"),
        lat=("lat", _first),
        lng=("lng", _first),
    )
    out["lat"] = pd.to_numeric(out["lat"], errors="coerce")
    out["lng"] = pd.to_numeric(out["lng"], errors="coerce")
    out = out.sort_values("avg_duration", ascending=False, kind="mergesort")
    return out[GLOBE_COLUMNS].reset_index(drop=True)


def build_all_views(
    records: pd.DataFrame, selection: SelectionState | None = None
) -> ViewBundle:
    selection = selection or SelectionState()
    return ViewBundle(
        bar=build_bar_view(records, selection),
        scatter=build_scatter_view(records, selection),
        globe=build_globe_view(records, selection),
        selection=selection,
    )
