from __future__ import annotations

import pytest

from modgrid.domain.history import HistoryStack


def test_empty_stack_has_cursor_minus_one() -> None:
    stack: HistoryStack[str] = HistoryStack()
    assert stack.cursor == -1
    assert stack.current() is None
    assert stack.undo() is None
    assert stack.redo() is None


def test_undo_redo_walk_the_stack() -> None:
    stack: HistoryStack[str] = HistoryStack()
    for entry in ("S0", "S1", "S2"):
        stack.checkpoint(entry)

    assert stack.undo() == "S1"
    assert stack.undo() == "S0"
    assert stack.undo() is None
    assert stack.cursor == 0
    assert stack.redo() == "S1"
    assert stack.redo() == "S2"
    assert stack.redo() is None


def test_new_checkpoint_after_undo_discards_redo_branch() -> None:
    stack: HistoryStack[str] = HistoryStack()
    for entry in ("S0", "S1", "S2"):
        stack.checkpoint(entry)
    stack.undo()
    stack.checkpoint("S3")

    assert len(stack) == 3
    assert stack.current() == "S3"
    assert stack.can_redo is False
    assert stack.undo() == "S1"
    assert stack.undo() == "S0"


def test_capacity_evicts_oldest_and_shifts_cursor() -> None:
    stack: HistoryStack[int] = HistoryStack(capacity=100)
    for entry in range(150):
        stack.checkpoint(entry)

    assert len(stack) == 100
    assert stack.cursor == 99
    assert stack.current() == 149

    undone = [stack.undo() for _ in range(99)]
    assert undone[-1] == 50
    assert stack.undo() is None


def test_eviction_after_undo_keeps_logical_position() -> None:
    stack: HistoryStack[int] = HistoryStack(capacity=3)
    for entry in (0, 1, 2):
        stack.checkpoint(entry)
    stack.undo()
    stack.checkpoint(3)  # truncates 2, no eviction needed
    assert len(stack) == 3
    stack.checkpoint(4)
    assert len(stack) == 3
    assert stack.current() == 4
    assert stack.undo() == 3
    assert stack.undo() == 1
    assert stack.undo() is None


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        HistoryStack(capacity=0)
