"""Shared selection state for the linked pit-stop views.

The state is immutable: every transition returns a new ``SelectionState`` and the
coordinator swaps its reference. Track and constructor are single-select.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SelectionPhase(Enum):
    IDLE = "idle"
    TRACK = "track"
    CONSTRUCTOR = "constructor"
    TRACK_AND_CONSTRUCTOR = "track_and_constructor"


class Emphasis(Enum):
    NEUTRAL = "neutral"
    EMPHASIZED = "emphasized"
    DEEMPHASIZED = "deemphasized"


def _emphasis(selected: str | None, value: object) -> Emphasis:
    if selected is None:
        return Emphasis.NEUTRAL
    return Emphasis.EMPHASIZED if value == selected else Emphasis.DEEMPHASIZED


@dataclass(frozen=True)
class SelectionState:
    year_range: tuple[int, int] | None = None
    selected_track: str | None = None
    selected_constructor: str | None = None

    @property
    def phase(self) -> SelectionPhase:
        if self.selected_track is not None and self.selected_constructor is not None:
            return SelectionPhase.TRACK_AND_CONSTRUCTOR
        if self.selected_track is not None:
            return SelectionPhase.TRACK
        if self.selected_constructor is not None:
            return SelectionPhase.CONSTRUCTOR
        return SelectionPhase.IDLE

    def set_year_range(self, start_year: int, end_year: int) -> SelectionState:
        if start_year > end_year:
            raise ValueError(f"start_year {start_year} is after end_year {end_year}")
        return replace(self, year_range=(int(start_year), int(end_year)))

    def select_constructor(self, constructor: str) -> SelectionState:
        """Toggle the constructor; the track selection is left alone."""
        if self.selected_constructor == constructor:
            return replace(self, selected_constructor=None)
        return replace(self, selected_constructor=constructor)

    def select_track(self, track: str) -> SelectionState:
        """Toggle the track.

        Deselecting the track also drops the constructor. Switching to another
        track keeps it.
        """
        if self.selected_track == track:
            return replace(self, selected_track=None, selected_constructor=None)
        return replace(self, selected_track=track)

    def clear_all(self) -> SelectionState:
        return replace(self, selected_track=None, selected_constructor=None)

    def constructor_emphasis(self, constructor: object) -> Emphasis:
        return _emphasis(self.selected_constructor, constructor)

    def track_emphasis(self, track: object) -> Emphasis:
        return _emphasis(self.selected_track, track)

    def describe(self) -> str:
        parts = []
        if self.selected_track is not None:
            parts.append(self.selected_track)
        if self.selected_constructor is not None:
            parts.append(self.selected_constructor)
        return " · ".join(parts) if parts else "None"
