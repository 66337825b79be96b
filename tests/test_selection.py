"""Tests for the measurement-mode selection state machine."""

from pipe_measure import SelectionState
from pipe_measure.selection import IDLE, MEASURING


class TestModeTransitions:
    def test_starts_idle_and_empty(self):
        sel = SelectionState()
        assert sel.state == IDLE
        assert sel.measuring is False
        assert sel.selected_ids == []

    def test_enable_moves_to_measuring(self):
        sel = SelectionState()
        sel.enable_measurement()
        assert sel.state == MEASURING
        assert sel.selected_ids == []

    def test_disable_clears_selection(self):
        sel = SelectionState()
        sel.enable_measurement()
        sel.toggle_selection(3)
        sel.toggle_selection(7)
        sel.disable_measurement()
        assert sel.state == IDLE
        assert sel.selected_ids == []

    def test_enable_while_measuring_keeps_selection(self):
        sel = SelectionState()
        sel.enable_measurement()
        sel.toggle_selection(3)
        sel.enable_measurement()
        assert sel.selected_ids == [3]

    def test_disable_then_enable_starts_empty(self):
        sel = SelectionState()
        sel.enable_measurement()
        sel.toggle_selection(3)
        sel.disable_measurement()
        sel.enable_measurement()
        assert sel.state == MEASURING
        assert sel.selected_ids == []


class TestToggle:
    def test_toggle_twice_returns_to_empty(self):
        sel = SelectionState()
        sel.enable_measurement()
        assert sel.toggle_selection(5) is True
        assert sel.toggle_selection(5) is False
        assert sel.selected_ids == []

    def test_keeps_insertion_order(self):
        sel = SelectionState()
        sel.enable_measurement()
        for pid in (9, 2, 5):
            sel.toggle_selection(pid)
        sel.toggle_selection(2)
        sel.toggle_selection(2)
        assert sel.selected_ids == [9, 5, 2]
        assert len(sel) == 3
        assert sel.is_selected(5)

    def test_ignored_while_idle(self):
        sel = SelectionState()
        assert sel.toggle_selection(1) is False
        assert sel.selected_ids == []
        assert sel.state == IDLE

    def test_clear_keeps_mode(self):
        sel = SelectionState()
        sel.enable_measurement()
        sel.toggle_selection(1)
        sel.clear_selection()
        assert sel.selected_ids == []
        assert sel.state == MEASURING


class TestRetain:
    def test_drops_stale_ids(self):
        sel = SelectionState()
        sel.enable_measurement()
        for pid in (1, 2, 3):
            sel.toggle_selection(pid)
        dropped = sel.retain([1, 3, 10])
        assert dropped == [2]
        assert sel.selected_ids == [1, 3]
