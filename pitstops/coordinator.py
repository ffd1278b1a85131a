from __future__ import annotations

import logging
from typing import Protocol

import pandas as pd

from pitstops.selection import SelectionState
from pitstops.transform import filter_year_range, year_bounds
from pitstops.views import ViewBundle, build_all_views

logger = logging.getLogger(__name__)


class ViewAdapter(Protocol):
    def render(self, views: ViewBundle) -> None: ...


class DashboardCoordinator:
    """Owns the selection and the active record table for one page session.

    Every event applies one ``SelectionState`` transition, recomputes all three
    views from scratch and pushes them to the attached adapters before returning.
    """

    def __init__(
        self,
        records: pd.DataFrame,
        adapters: list[ViewAdapter] | None = None,
    ) -> None:
        self._all_records = records
        self._records = records
        self._selection = SelectionState(year_range=year_bounds(records))
        self._adapters: list[ViewAdapter] = list(adapters or [])
        self._views = build_all_views(self._records, self._selection)

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def records(self) -> pd.DataFrame:
        return self._records

    @property
    def views(self) -> ViewBundle:
        return self._views

    @property
    def full_year_range(self) -> tuple[int, int] | None:
        return year_bounds(self._all_records)

    def attach(self, adapter: ViewAdapter) -> None:
        self._adapters.append(adapter)
        adapter.render(self._views)

    def set_year_range(self, start_year: int, end_year: int) -> ViewBundle:
        selection = self._selection.set_year_range(start_year, end_year)
        if selection.year_range == self._selection.year_range:
            return self._views
        self._records = filter_year_range(self._all_records, start_year, end_year)
        logger.debug(
            "Year range %s-%s keeps %s of %s records",
            start_year,
            end_year,
            len(self._records.index),
            len(self._all_records.index),
        )
        return self._apply(selection)

    def click_constructor(self, constructor: str) -> ViewBundle:
        return self._apply(self._selection.select_constructor(constructor))

    def click_track(self, track: str) -> ViewBundle:
        return self._apply(self._selection.select_track(track))

    def clear_all(self) -> ViewBundle:
        return self._apply(self._selection.clear_all())

    def _apply(self, selection: SelectionState) -> ViewBundle:
        logger.debug("Selection %s -> %s", self._selection, selection)
        self._selection = selection
        self._views = build_all_views(self._records, selection)
        for adapter in self._adapters:
            adapter.render(self._views)
        return self._views
