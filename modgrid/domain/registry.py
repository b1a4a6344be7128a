"""Module registry: creation, field updates, and deletion with input clamping.

Out-of-range numeric input is clamped into its valid range, never rejected.
Updates and deletes of unknown ids are no-ops reported through the return
value.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from .entities import (
    BORDER_WIDTH_RANGE,
    DEFAULT_BORDER_COLOR,
    DEFAULT_COLOR,
    ROW_RANGE,
    Module,
    ModuleId,
    ModuleType,
)
from .layout_utils import clamp, coerce_int, is_blank, normalize_group_id
from .state import LayoutState

logger = logging.getLogger(__name__)

DEFAULT_COL = 2
DEFAULT_ROW = 2

# External (renderer/form) names mapped onto Module attributes.
_FIELD_ALIASES: Dict[str, str] = {
    "type": "kind",
    "mobileCol": "mobile_col",
    "groupId": "group_id",
    "borderColor": "border_color",
    "borderWidth": "border_width",
}


class ModuleIdAllocator:
    """Hands out strictly increasing ids; never rewinds, even across undo."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> ModuleId:
        issued = self._next
        self._next += 1
        return issued


class ModuleRegistry:
    """CRUD over ``LayoutState.modules`` keeping both order lists in step."""

    def __init__(self, allocator: Optional[ModuleIdAllocator] = None) -> None:
        self.allocator = allocator or ModuleIdAllocator()
        self._normalizers: Dict[str, Callable[[LayoutState, Any], Any]] = {
            "col": self._norm_col,
            "row": self._norm_row,
            "mobile_col": self._norm_mobile_col,
            "kind": self._norm_kind,
            "group_id": self._norm_group_id,
            "color": self._norm_color,
            "transparent": self._norm_transparent,
            "border_color": self._norm_border_color,
            "border_width": self._norm_border_width,
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @staticmethod
    def get(state: LayoutState, module_id: ModuleId) -> Optional[Module]:
        return state.modules.get(module_id)

    @staticmethod
    def all(state: LayoutState) -> List[Module]:
        """All modules in creation order."""
        return list(state.modules.values())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, state: LayoutState, spec: Optional[Mapping[str, Any]] = None) -> ModuleId:
        """Create a module from ``spec`` and append it to both order lists."""
        spec = {_FIELD_ALIASES.get(key, key): value for key, value in (spec or {}).items()}
        col = spec.pop("col", None)
        row = spec.pop("row", None)
        values = self.normalize_patch(state, spec)
        values["col"] = clamp(coerce_int(col, DEFAULT_COL), 1, state.config.desktop_columns)
        values["row"] = clamp(coerce_int(row, DEFAULT_ROW), *ROW_RANGE)
        module = Module(id=self.allocator.next_id(), **values)
        state.modules[module.id] = module
        state.orders.append(module.id)
        logger.debug("Created module %s (%s, %s)", module.id, module.label, module.kind.value)
        return module.id

    def update(self, state: LayoutState, module_id: ModuleId, patch: Mapping[str, Any]) -> bool:
        """Apply ``patch`` to a module.

        Returns False for unknown ids and for patches that change no value.
        """
        current = state.modules.get(module_id)
        if current is None:
            return False
        values = self.normalize_patch(state, patch)
        updated = replace(current, **values)
        if updated == current:
            return False
        state.modules[module_id] = updated
        logger.debug("Updated module %s: %s", module_id, sorted(values))
        return True

    def delete(self, state: LayoutState, module_id: ModuleId) -> bool:
        """Remove one module; group mates are left in place."""
        if module_id not in state.modules:
            return False
        del state.modules[module_id]
        state.orders.discard(module_id)
        if state.selected_id == module_id:
            state.selected_id = None
        logger.debug("Deleted module %s", module_id)
        return True

    def clear(self, state: LayoutState) -> int:
        """Remove every module. Returns how many were removed."""
        count = len(state.modules)
        state.modules = {}
        state.orders.clear()
        state.selected_id = None
        return count

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------
    def normalize_patch(self, state: LayoutState, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Map field names onto Module attributes and clamp every value."""
        values: Dict[str, Any] = {}
        for raw_key, raw_value in patch.items():
            key = _FIELD_ALIASES.get(raw_key, raw_key)
            normalizer = self._normalizers.get(key)
            if normalizer is None:
                raise ValueError(f"Unknown module field: {raw_key}")
            values[key] = normalizer(state, raw_value)
        return values

    @staticmethod
    def _norm_col(state: LayoutState, value: Any) -> int:
        return clamp(coerce_int(value, 1), 1, state.config.desktop_columns)

    @staticmethod
    def _norm_row(state: LayoutState, value: Any) -> int:
        low, high = ROW_RANGE
        return clamp(coerce_int(value, 1), low, high)

    @staticmethod
    def _norm_mobile_col(state: LayoutState, value: Any) -> Optional[int]:
        if is_blank(value):
            return None
        return clamp(coerce_int(value, 1), 1, state.config.target_columns)

    @staticmethod
    def _norm_kind(state: LayoutState, value: Any) -> ModuleType:
        kind = ModuleType.parse(value)
        if kind is None:
            logger.warning("Unknown module type %r; using 'box'", value)
            return ModuleType.BOX
        return kind

    @staticmethod
    def _norm_group_id(state: LayoutState, value: Any) -> Optional[str]:
        return normalize_group_id(value)

    @staticmethod
    def _norm_color(state: LayoutState, value: Any) -> str:
        return str(value).strip() if not is_blank(value) else DEFAULT_COLOR

    @staticmethod
    def _norm_transparent(state: LayoutState, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _norm_border_color(state: LayoutState, value: Any) -> str:
        return str(value).strip() if not is_blank(value) else DEFAULT_BORDER_COLOR

    @staticmethod
    def _norm_border_width(state: LayoutState, value: Any) -> int:
        low, high = BORDER_WIDTH_RANGE
        return clamp(coerce_int(value, 0), low, high)


__all__ = ["DEFAULT_COL", "DEFAULT_ROW", "ModuleIdAllocator", "ModuleRegistry"]
