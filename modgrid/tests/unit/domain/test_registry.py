from __future__ import annotations

import pytest

from modgrid.domain.entities import LayoutConfig, ModuleType
from modgrid.domain.registry import ModuleIdAllocator, ModuleRegistry
from modgrid.domain.state import LayoutState


def _state(desktop_columns: int = 6, target_columns: int = 2) -> LayoutState:
    return LayoutState(
        config=LayoutConfig(desktop_columns=desktop_columns, target_columns=target_columns)
    )


def test_create_clamps_and_appends_to_both_orders() -> None:
    state = _state()
    registry = ModuleRegistry()

    first = registry.create(state, {"col": 9, "row": 0})
    second = registry.create(state, {"col": "-2", "row": "150"})

    assert second > first
    assert state.modules[first].col == 6
    assert state.modules[first].row == 2  # zero means "use the default"
    assert state.modules[second].col == 1
    assert state.modules[second].row == 99
    assert state.orders.desktop == [first, second]
    assert state.orders.mobile == [first, second]


def test_create_defaults() -> None:
    state = _state()
    module_id = ModuleRegistry().create(state)
    module = state.modules[module_id]
    assert (module.col, module.row) == (2, 2)
    assert module.kind is ModuleType.BOX
    assert module.mobile_col is None
    assert module.group_id is None
    assert module.border_width == 0


def test_ids_never_reused_after_delete() -> None:
    state = _state()
    registry = ModuleRegistry(ModuleIdAllocator(start=10))
    first = registry.create(state)
    registry.delete(state, first)
    second = registry.create(state)
    assert first == 10
    assert second == 11


def test_update_clamps_like_create() -> None:
    state = _state(desktop_columns=6, target_columns=2)
    registry = ModuleRegistry()
    module_id = registry.create(state, {"col": 3, "row": 2})

    assert registry.update(state, module_id, {"col": 20, "row": -4, "border_width": 99})
    module = state.modules[module_id]
    assert module.col == 6
    assert module.row == 1
    assert module.border_width == 20

    registry.update(state, module_id, {"mobile_col": 7})
    assert state.modules[module_id].mobile_col == 2


def test_update_col_keeps_mobile_override() -> None:
    state = _state()
    registry = ModuleRegistry()
    module_id = registry.create(state, {"col": 3, "mobile_col": 1})
    registry.update(state, module_id, {"col": 6})
    assert state.modules[module_id].mobile_col == 1


def test_blank_mobile_col_clears_override() -> None:
    state = _state()
    registry = ModuleRegistry()
    module_id = registry.create(state, {"mobileCol": 2})
    assert state.modules[module_id].mobile_col == 2
    registry.update(state, module_id, {"mobileCol": ""})
    assert state.modules[module_id].mobile_col is None


def test_group_and_type_are_normalized() -> None:
    state = _state()
    registry = ModuleRegistry()
    module_id = registry.create(state)

    registry.update(state, module_id, {"groupId": "  hero  ", "type": "TEXT"})
    module = state.modules[module_id]
    assert module.group_id == "hero"
    assert module.kind is ModuleType.TEXT

    registry.update(state, module_id, {"group_id": "   ", "kind": "video"})
    module = state.modules[module_id]
    assert module.group_id is None
    assert module.kind is ModuleType.BOX


def test_update_unknown_field_raises() -> None:
    state = _state()
    registry = ModuleRegistry()
    module_id = registry.create(state)
    with pytest.raises(ValueError):
        registry.update(state, module_id, {"width": 3})


def test_update_and_delete_missing_ids_are_noops() -> None:
    state = _state()
    registry = ModuleRegistry()
    registry.create(state)
    assert registry.update(state, 404, {"col": 2}) is False
    assert registry.delete(state, 404) is False
    assert len(state.modules) == 1


def test_delete_clears_selection_and_keeps_group_mates() -> None:
    state = _state()
    registry = ModuleRegistry()
    a = registry.create(state, {"group_id": "g"})
    b = registry.create(state, {"group_id": "g"})
    state.select(a)

    assert registry.delete(state, a) is True
    assert state.selected_id is None
    assert list(state.modules) == [b]
    assert state.orders.desktop == [b]
    assert state.orders.mobile == [b]


def test_clear_removes_everything() -> None:
    state = _state()
    registry = ModuleRegistry()
    registry.create(state)
    registry.create(state)
    assert registry.clear(state) == 2
    assert state.modules == {}
    assert state.orders.desktop == []
    assert state.orders.mobile == []


def test_update_with_unchanged_values_reports_no_change() -> None:
    state = _state()
    registry = ModuleRegistry()
    module_id = registry.create(state, {"col": 3, "kind": "box"})
    before = state.modules[module_id]

    assert registry.update(state, module_id, {"col": "3", "type": "box"}) is False
    assert registry.update(state, module_id, {"col": 40}) is True
    assert registry.update(state, module_id, {"col": 6}) is False
    assert state.modules[module_id] is not before
