from __future__ import annotations

import pytest

from pitstops.selection import Emphasis, SelectionPhase, SelectionState


def test_initial_state_is_idle() -> None:
    state = SelectionState(year_range=(2011, 2024))
    assert state.phase is SelectionPhase.IDLE
    assert state.describe() == "None"


def test_select_constructor_toggles_and_keeps_track() -> None:
    state = SelectionState(selected_track="Monza")

    selected = state.select_constructor("Ferrari")
    assert selected.selected_constructor == "Ferrari"
    assert selected.selected_track == "Monza"
    assert selected.phase is SelectionPhase.TRACK_AND_CONSTRUCTOR

    switched = selected.select_constructor("McLaren")
    assert switched.selected_constructor == "McLaren"

    cleared = switched.select_constructor("McLaren")
    assert cleared.selected_constructor is None
    assert cleared.selected_track == "Monza"


def test_select_new_track_keeps_constructor() -> None:
    state = SelectionState(selected_track="Monza", selected_constructor="Ferrari")

    moved = state.select_track("Silverstone")
    assert moved.selected_track == "Silverstone"
    assert moved.selected_constructor == "Ferrari"


def test_deselect_track_also_clears_constructor() -> None:
    state = SelectionState(selected_track="Monza", selected_constructor="Ferrari")

    cleared = state.select_track("Monza")
    assert cleared.selected_track is None
    assert cleared.selected_constructor is None
    assert cleared.phase is SelectionPhase.IDLE


def test_track_round_trip_restores_state() -> None:
    state = SelectionState(year_range=(2015, 2016))
    assert state.select_track("Monza").select_track("Monza") == state


def test_clear_all_keeps_year_range() -> None:
    state = SelectionState(
        year_range=(2015, 2018), selected_track="Monza", selected_constructor="Ferrari"
    )

    cleared = state.clear_all()
    assert cleared == SelectionState(year_range=(2015, 2018))


def test_set_year_range_leaves_selection() -> None:
    state = SelectionState(year_range=(2011, 2024), selected_track="Monza")

    narrowed = state.set_year_range(2015, 2015)
    assert narrowed.year_range == (2015, 2015)
    assert narrowed.selected_track == "Monza"


def test_set_year_range_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        SelectionState().set_year_range(2020, 2015)


def test_transitions_do_not_mutate() -> None:
    state = SelectionState()
    state.select_track("Monza")
    state.select_constructor("Ferrari")
    assert state == SelectionState()


def test_emphasis() -> None:
    idle = SelectionState()
    assert idle.constructor_emphasis("Ferrari") is Emphasis.NEUTRAL
    assert idle.track_emphasis("Monza") is Emphasis.NEUTRAL

    state = SelectionState(selected_track="Monza", selected_constructor="Ferrari")
    assert state.constructor_emphasis("Ferrari") is Emphasis.EMPHASIZED
    assert state.constructor_emphasis("Mercedes") is Emphasis.DEEMPHASIZED
    assert state.track_emphasis("Monza") is Emphasis.EMPHASIZED
    assert state.track_emphasis("Baku") is Emphasis.DEEMPHASIZED
    assert state.describe() == "Monza · Ferrari"
