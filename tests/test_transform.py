from __future__ import annotations

import pandas as pd
import pytest

from pitstops.transform import (
    RECORD_COLUMNS,
    build_record_table,
    filter_year_range,
    normalize_constructor_names,
    year_bounds,
)


def _raw() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "season": 2018,
                "year": "2018",
                "track": "monza",
                "circuitName": "Autodromo Nazionale di Monza",
                "constructorName": "Force India",
                "duration": "23.456",
                "position": "5",
                "positionOrder": 5,
                "lat_race": "45.6156",
                "lng_race": "9.28111",
                "raceId": 1001,
            },
            {
                "season": 2020,
                "year": "2020",
                "track": "monza",
                "circuitName": "Autodromo Nazionale di Monza",
                "constructorName": "Racing Point",
                "duration": "16:44.718",
                "position": None,
                "positionOrder": 20,
                "lat_race": "45.6156",
                "lng_race": "9.28111",
                "raceId": 1040,
            },
        ]
    )


def test_normalize_constructor_names_single_step() -> None:
    names = pd.Series(["Force India", "Racing Point", "Sauber", "Brawn", None])

    out = normalize_constructor_names(names)
    assert out.tolist()[:4] == ["Racing Point", "Aston Martin", "Alfa Romeo", "Brawn"]
    assert out.isna().tolist()[4]


def test_build_record_table() -> None:
    table = build_record_table(_raw())

    assert list(table.columns) == RECORD_COLUMNS
    assert table["constructor_name"].tolist() == ["Racing Point", "Aston Martin"]
    assert table["year"].tolist() == [2018, 2020]
    assert table.loc[0, "duration"] == pytest.approx(23.456)
    # Unparseable durations are kept as NaN and rejected later by the views.
    assert pd.isna(table.loc[1, "duration"])
    assert table.loc[0, "lat"] == pytest.approx(45.6156)


def test_build_record_table_fills_missing_optional_columns() -> None:
    table = build_record_table(_raw().drop(columns=["lat_race", "lng_race"]))
    assert table["lat"].isna().all()
    assert table["lng"].isna().all()


def test_year_bounds() -> None:
    table = build_record_table(_raw())
    assert year_bounds(table) == (2018, 2020)
    assert year_bounds(table.iloc[0:0]) is None


def test_filter_year_range_inclusive() -> None:
    table = build_record_table(_raw())

    assert filter_year_range(table, 2018, 2018)["year"].tolist() == [2018]
    assert filter_year_range(table, 2018, 2020)["year"].tolist() == [2018, 2020]
    assert filter_year_range(table, 2019, 2019).empty


def test_filter_year_range_does_not_mutate() -> None:
    table = build_record_table(_raw())
    before = table.copy()

    filter_year_range(table, 2020, 2020)
    pd.testing.assert_frame_equal(table, before)


def test_filter_year_range_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        filter_year_range(build_record_table(_raw()), 2020, 2018)
