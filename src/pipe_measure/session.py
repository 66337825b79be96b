"""Per-view session state: pipe collection, selection and tag filter.

A ``PipeSession`` is owned by one controller and handed to the views that
need it. Table and map views read the same ``FilterState`` so they can never
disagree on the active tag.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from .filters import FilterState, distinct_tags
from .measurement import measure
from .models import MeasurementReport, Pipe
from .selection import SelectionState

logger = structlog.get_logger(__name__)


class PipeSession:
    def __init__(self, pipes: Iterable[Pipe] = ()) -> None:
        self.selection = SelectionState()
        self.filter = FilterState()
        self._pipes: list[Pipe] = []
        self._by_id: dict[int, Pipe] = {}
        self.load_pipes(pipes)

    @property
    def pipes(self) -> list[Pipe]:
        return list(self._pipes)

    def load_pipes(self, pipes: Iterable[Pipe]) -> None:
        """Replace the whole collection. Selection and filter are kept as-is."""
        self._pipes = list(pipes)
        self._by_id = {p.id: p for p in self._pipes}
        logger.info("pipes_loaded", count=len(self._pipes), tag=self.filter.tag)

    def set_filter(self, tag: str | None) -> None:
        self.filter.set_filter(tag)

    def visible_pipes(self) -> list[Pipe]:
        return self.filter.apply(self._pipes)

    def tags(self) -> list[str]:
        return distinct_tags(self._pipes)

    def enable_measurement(self) -> None:
        self.selection.enable_measurement()

    def disable_measurement(self) -> None:
        self.selection.disable_measurement()

    def toggle_pipe(self, pipe_id: int) -> bool:
        return self.selection.toggle_selection(pipe_id)

    def clear_selection(self) -> None:
        self.selection.clear_selection()

    def selected_pipes(self) -> list[Pipe]:
        """Selected pipes in selection order; ids no longer loaded are skipped."""
        return [self._by_id[pid] for pid in self.selection.selected_ids if pid in self._by_id]

    def measure(self) -> MeasurementReport:
        return measure(self.selected_pipes())
