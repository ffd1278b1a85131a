from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)

# Historical lookup for teams that raced under several names. Applied as a single
# lookup step; chains such as Force India -> Racing Point -> Aston Martin are not
# followed transitively.
CONSTRUCTOR_NAME_MAPPING = {
    "Manor Marussia": "Marussia",
    "Marussia": "Marussia",
    "Sauber": "Alfa Romeo",
    "Alfa Romeo": "Alfa Romeo",
    "Haas F1 Team": "Haas",
    "Racing Point": "Aston Martin",
    "Williams": "Williams",
    "Toro Rosso": "AlphaTauri",
    "AlphaTauri": "AlphaTauri",
    "Aston Martin": "Aston Martin",
    "McLaren": "McLaren",
    "Force India": "Racing Point",
    "Mercedes": "Mercedes",
    "Alpine F1 Team": "Alpine",
    "Ferrari": "Ferrari",
    "Renault": "Alpine",
    "Red Bull": "Red Bull",
    "RB F1 Team": "Red Bull",
    "Lotus F1": "Lotus",
    "Caterham": "Caterham",
}

SOURCE_TO_TABLE_COLUMNS = {
    "circuitName": "circuit_name",
    "constructorName": "constructor_name",
    "positionOrder": "position_order",
    "lat_race": "lat",
    "lng_race": "lng",
}

RECORD_COLUMNS = [
    "season",
    "year",
    "track",
    "circuit_name",
    "constructor_name",
    "duration",
    "position",
    "position_order",
    "lat",
    "lng",
]


def normalize_constructor_names(
    names: pd.Series, mapping: dict[str, str] | None = None
) -> pd.Series:
    lookup = CONSTRUCTOR_NAME_MAPPING if mapping is None else mapping
    return names.map(lambda name: lookup.get(name, name) if pd.notna(name) else name)


def build_record_table(raw: pd.DataFrame) -> pd.DataFrame:
    """Shape the raw CSV into the record table used by every view.

    Columns are renamed to snake_case, constructor aliases are resolved and the
    numeric fields are coerced (unparseable values become NaN and are later
    rejected by the row validity predicate rather than here).
    """
    table = raw.rename(columns=SOURCE_TO_TABLE_COLUMNS).copy()
    for col in RECORD_COLUMNS:
        if col not in table.columns:
            table[col] = pd.NA

    table = table[RECORD_COLUMNS].copy()

    renamed = normalize_constructor_names(table["constructor_name"])
    changed = int((table["constructor_name"].notna() & (renamed != table["constructor_name"])).sum())
    table["constructor_name"] = renamed

    table["year"] = pd.to_numeric(table["year"], errors="coerce").astype("Int64")
    for col in ("duration", "lat", "lng"):
        table[col] = pd.to_numeric(table[col], errors="coerce")

    logger.info(
        "Built record table: %s rows, %s constructor names normalised",
        len(table.index),
        changed,
    )
    return table.reset_index(drop=True)


def year_bounds(records: pd.DataFrame) -> tuple[int, int] | None:
    if records.empty:
        return None
    years = pd.to_numeric(records["year"], errors="coerce").dropna()
    if years.empty:
        return None
    return int(years.min()), int(years.max())


def filter_year_range(records: pd.DataFrame, start_year: int, end_year: int) -> pd.DataFrame:
    """Return the records whose year lies in ``[start_year, end_year]``."""
    if start_year > end_year:
        raise ValueError(f"start_year {start_year} is after end_year {end_year}")
    years = pd.to_numeric(records["year"], errors="coerce")
    mask = (years >= start_year) & (years <= end_year)
    return records[mask.fillna(False).astype(bool)]
