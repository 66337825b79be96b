"""Measurement-mode selection state.

Two states: ``idle`` (mode off, nothing selected) and ``measuring`` (mode on,
zero or more pipe ids selected). Turning the mode off always clears the
selection; turning it on never does.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

logger = structlog.get_logger(__name__)

IDLE = "idle"
MEASURING = "measuring"


class SelectionState:
    """Ordered set of selected pipe ids plus the measurement-mode flag."""

    def __init__(self) -> None:
        self._measuring = False
        # insertion-ordered set
        self._ids: dict[int, None] = {}

    @property
    def measuring(self) -> bool:
        return self._measuring

    @property
    def state(self) -> str:
        return MEASURING if self._measuring else IDLE

    @property
    def selected_ids(self) -> list[int]:
        """Selected ids in the order they were picked."""
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def is_selected(self, pipe_id: int) -> bool:
        return pipe_id in self._ids

    def enable_measurement(self) -> None:
        self._measuring = True
        logger.debug("measurement_enabled", selected=len(self._ids))

    def disable_measurement(self) -> None:
        self._measuring = False
        self._ids.clear()
        logger.debug("measurement_disabled")

    def toggle_selection(self, pipe_id: int) -> bool:
        """Add or remove ``pipe_id``; return whether it is selected afterwards.

        Ignored while idle.
        """
        if not self._measuring:
            logger.debug("toggle_ignored", pipe_id=pipe_id, state=IDLE)
            return False
        if pipe_id in self._ids:
            del self._ids[pipe_id]
            return False
        self._ids[pipe_id] = None
        return True

    def clear_selection(self) -> None:
        self._ids.clear()

    def retain(self, valid_ids: Iterable[int]) -> list[int]:
        """Drop selected ids not in ``valid_ids``; return the dropped ones."""
        keep = set(valid_ids)
        dropped = [pid for pid in self._ids if pid not in keep]
        for pid in dropped:
            del self._ids[pid]
        if dropped:
            logger.debug("selection_pruned", dropped=dropped)
        return dropped
