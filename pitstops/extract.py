from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from pitstops.config import get_settings

logger = logging.getLogger(__name__)

# Columns the source file must carry, by their source names.
REQUIRED_SOURCE_COLUMNS = (
    "season",
    "year",
    "track",
    "circuitName",
    "constructorName",
    "duration",
    "position",
    "positionOrder",
)


class DataLoadError(RuntimeError):
    """Raised when the pit-stop table cannot be read."""


def read_pitstop_csv(path: str | Path | None = None) -> pd.DataFrame:
    """Read the raw pit-stop CSV exactly as stored (no renaming, no aliasing)."""
    csv_path = Path(path) if path is not None else Path(get_settings().csv_path)
    if not csv_path.is_file():
        raise DataLoadError(f"Pit-stop data file not found: {csv_path}")

    try:
        # \N is the null marker of the Ergast exports the file is built from.
        raw = pd.read_csv(csv_path, na_values=["\\N"], keep_default_na=True)
    except (
        OSError,
        UnicodeDecodeError,
        pd.errors.EmptyDataError,
        pd.errors.ParserError,
    ) as exc:
        raise DataLoadError(f"Could not parse {csv_path}: {exc}") from exc

    missing = [col for col in REQUIRED_SOURCE_COLUMNS if col not in raw.columns]
    if missing:
        raise DataLoadError(f"{csv_path} is missing required columns: {', '.join(missing)}")

    logger.info("Read %s pit-stop rows from %s", len(raw.index), csv_path)
    return raw
