from __future__ import annotations

import pandas as pd
import pytest

from pitstops.selection import SelectionState
from pitstops.transform import RECORD_COLUMNS
from pitstops.views import (
    BAR_COLUMNS,
    GLOBE_COLUMNS,
    SCATTER_COLUMNS,
    build_all_views,
    build_bar_view,
    build_globe_view,
    build_scatter_view,
    eligible_rows,
)

_CIRCUITS = {
    "Monza": ("monza", 45.62, 9.28),
    "Silverstone": ("silverstone", 52.07, -1.02),
    "Baku": ("baku", 40.37, 49.85),
}


def _record(circuit: str, constructor: str, duration: object, year: int = 2015, **extra) -> dict:
    track, lat, lng = _CIRCUITS[circuit]
    row = {
        "season": year,
        "year": year,
        "track": track,
        "circuit_name": circuit,
        "constructor_name": constructor,
        "duration": duration,
        "position": 1,
        "position_order": 1,
        "lat": lat,
        "lng": lng,
    }
    row.update(extra)
    return row


def _season() -> pd.DataFrame:
    return pd.DataFrame(
        [
            _record("Monza", "Ferrari", "3.5"),
            _record("Monza", "Ferrari", "4.5"),
            _record("Monza", "Mercedes", "2.5", position_order=2),
            _record("Silverstone", "Ferrari", "5.0", position_order=3),
            _record("Silverstone", "Williams", "6.0", position_order=9),
            _record("Baku", "Mercedes", "3.0", year=2016, position_order=1),
            _record("Baku", "Williams", "7.0", year=2016, position_order=12),
        ]
    )


def test_bar_view_sample_records() -> None:
    records = pd.DataFrame([_record("Monza", "Ferrari", "3.5"), _record("Monza", "Ferrari", "4.5")])

    out = build_bar_view(records, SelectionState())
    assert out.to_dict("records") == [{"constructor_name": "Ferrari", "avg_duration": 4.0}]


def test_scatter_view_sample_records() -> None:
    records = pd.DataFrame([_record("Monza", "Ferrari", "3.5"), _record("Monza", "Ferrari", "4.5")])

    out = build_scatter_view(records, SelectionState())
    assert len(out) == 1
    row = out.iloc[0]
    assert row["key"] == "2015_Monza_Ferrari"
    assert row["avg_duration"] == 4.0
    assert row["finishing_position"] == 1
    assert row["constructor_name"] == "Ferrari"
    assert row["circuit_name"] == "Monza"
    assert row["year"] == 2015


@pytest.mark.parametrize(
    "selection",
    [
        SelectionState(),
        SelectionState(selected_track="Monza"),
        SelectionState(selected_track="Silverstone", selected_constructor="Ferrari"),
        SelectionState(selected_constructor="Williams"),
    ],
)
def test_bar_view_sorted_descending(selection: SelectionState) -> None:
    out = build_bar_view(_season(), selection)
    values = out["avg_duration"].tolist()
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_bar_view_ignores_constructor_selection() -> None:
    records = _season()
    track_only = build_bar_view(records, SelectionState(selected_track="Monza"))
    with_constructor = build_bar_view(
        records, SelectionState(selected_track="Monza", selected_constructor="Ferrari")
    )

    pd.testing.assert_frame_equal(track_only, with_constructor)
    assert track_only["constructor_name"].tolist() == ["Ferrari", "Mercedes"]


def test_scatter_view_applies_track_and_constructor() -> None:
    out = build_scatter_view(
        _season(), SelectionState(selected_track="Silverstone", selected_constructor="Ferrari")
    )
    assert out["key"].tolist() == ["2015_Silverstone_Ferrari"]
    assert out.iloc[0]["finishing_position"] == 3


def test_scatter_view_groups_by_year_track_constructor() -> None:
    out = build_scatter_view(_season())
    assert out["key"].tolist() == [
        "2015_Monza_Ferrari",
        "2015_Monza_Mercedes",
        "2015_Silverstone_Ferrari",
        "2015_Silverstone_Williams",
        "2016_Baku_Mercedes",
        "2016_Baku_Williams",
    ]
    assert list(out.columns) == SCATTER_COLUMNS


def test_scatter_view_drops_zero_mean_groups() -> None:
    records = pd.DataFrame(
        [
            _record("Monza", "Ferrari", "0"),
            _record("Monza", "Ferrari", "0.0"),
            _record("Monza", "Mercedes", "2.5"),
        ]
    )

    out = build_scatter_view(records)
    assert out["key"].tolist() == ["2015_Monza_Mercedes"]
    # The bar view still averages the zero stops.
    assert "Ferrari" in build_bar_view(records)["constructor_name"].tolist()


def test_scatter_view_takes_first_seen_position() -> None:
    records = pd.DataFrame(
        [
            _record("Monza", "Ferrari", "3.0", position_order=4),
            _record("Monza", "Ferrari", "5.0", position_order=7),
        ]
    )

    out = build_scatter_view(records)
    assert out.iloc[0]["finishing_position"] == 4
    assert out.iloc[0]["avg_duration"] == 4.0


def test_globe_view_keeps_every_circuit() -> None:
    records = _season()
    unselected = build_globe_view(records, SelectionState())
    selected = build_globe_view(records, SelectionState(selected_track="Monza"))

    pd.testing.assert_frame_equal(unselected, selected)
    assert sorted(unselected["circuit_name"]) == ["Baku", "Monza", "Silverstone"]


def test_globe_view_sorted_with_coordinates() -> None:
    out = build_globe_view(_season())

    assert out["circuit_name"].tolist() == ["Silverstone", "Baku", "Monza"]
    assert out["avg_duration"].tolist() == pytest.approx([5.5, 5.0, 3.5])
    monza = out[out["circuit_name"] == "Monza"].iloc[0]
    assert (monza["lat"], monza["lng"]) == (45.62, 9.28)


def test_null_duration_never_appears() -> None:
    records = pd.concat(
        [
            _season(),
            pd.DataFrame(
                [
                    _record("Baku", "Haas", None, year=2017),
                    _record("Baku", "Haas", float("nan"), year=2017),
                ]
            ),
        ],
        ignore_index=True,
    )

    for selection in (
        SelectionState(),
        SelectionState(selected_track="Baku"),
        SelectionState(selected_track="Baku", selected_constructor="Haas"),
    ):
        views = build_all_views(records, selection)
        assert "Haas" not in views.bar["constructor_name"].tolist()
        assert "Haas" not in views.scatter["constructor_name"].tolist()
        assert 2017 not in views.scatter["year"].tolist()


def test_eligible_rows_rejects_incomplete_and_non_numeric() -> None:
    records = pd.DataFrame(
        [
            _record("Monza", "Ferrari", "3.5"),
            _record("Monza", "Ferrari", "16:44.718"),
            _record("Monza", "Ferrari", "3.5", position="\\N"),
            _record("Monza", None, "3.5"),
            _record("Monza", "Ferrari", "3.5", season=None),
            _record("Monza", "Ferrari", "3.5", track=None),
        ]
    )

    out = eligible_rows(records)
    assert len(out) == 1
    assert out.iloc[0]["duration"] == 3.5


def test_eligible_rows_missing_required_column() -> None:
    records = pd.DataFrame([_record("Monza", "Ferrari", "3.5")]).drop(columns=["track"])
    assert eligible_rows(records).empty
    assert build_bar_view(records).empty


def test_unselected_views_are_supersets() -> None:
    records = _season()
    everything = build_all_views(records, SelectionState())
    narrowed = build_all_views(
        records, SelectionState(selected_track="Monza", selected_constructor="Ferrari")
    )

    assert set(narrowed.bar["constructor_name"]) <= set(everything.bar["constructor_name"])
    assert set(narrowed.scatter["key"]) <= set(everything.scatter["key"])
    assert set(narrowed.globe["circuit_name"]) <= set(everything.globe["circuit_name"])


def test_build_all_views_is_idempotent() -> None:
    records = _season()
    selection = SelectionState(selected_track="Monza")

    first = build_all_views(records, selection)
    second = build_all_views(records, selection)

    pd.testing.assert_frame_equal(first.bar, second.bar)
    pd.testing.assert_frame_equal(first.scatter, second.scatter)
    pd.testing.assert_frame_equal(first.globe, second.globe)
    assert first.selection == second.selection


def test_empty_input_gives_empty_views() -> None:
    views = build_all_views(pd.DataFrame(columns=RECORD_COLUMNS))

    assert views.bar.empty and list(views.bar.columns) == BAR_COLUMNS
    assert views.scatter.empty and list(views.scatter.columns) == SCATTER_COLUMNS
    assert views.globe.empty and list(views.globe.columns) == GLOBE_COLUMNS


def test_selection_matching_nothing_gives_empty_views() -> None:
    views = build_all_views(_season(), SelectionState(selected_track="Imola"))

    assert views.bar.empty
    assert views.scatter.empty
    assert len(views.globe) == 3
