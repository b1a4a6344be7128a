from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..app.controller import LayoutController
from ..domain.entities import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_COLOR,
    Module,
    ModuleId,
    ModuleType,
    Viewport,
)
from ..domain.errors import UseCaseError
from ..domain.spans import auto_mobile_span, desktop_span

logger = logging.getLogger(__name__)

ModuleRow = Dict[str, Any]


@dataclass
class DesignerVM:
    """Canvas and edit-panel state for the layout designer. Pure UI-logic.

    Responsibilities
    - Track the active viewport and the drag source of an in-progress drag
    - Forward commands to the controller and decide when edits are committed
    - Build DTOs for the canvas (module rows) and the edit panel
    - Report user-facing outcomes through ``on_toast``

    The view calls ``edit_selected`` for every intermediate value (typing,
    slider moves) and ``commit_selected`` once the edit is finished, so history
    only records finished edits.
    """

    controller: LayoutController = field(default_factory=LayoutController)

    on_state_changed: Optional[Callable[[], None]] = None
    on_selection_changed: Optional[Callable[[Optional[ModuleId]], None]] = None
    on_toast: Optional[Callable[[str], None]] = None
    on_confirm: Optional[Callable[[str], bool]] = None

    viewport: Viewport = Viewport.DESKTOP
    _drag_index: Optional[int] = None
    _drag_id: Optional[ModuleId] = None

    # ---- View / mode ----
    def switch_view(self, viewport: Viewport | str) -> None:
        self.viewport = Viewport(viewport)
        self._reset_drag()
        self.deselect()
        self._notify()

    def select_mode(self, mode: str) -> bool:
        try:
            config = self.controller.set_responsive_mode(mode)
        except UseCaseError as exc:
            self._toast(exc.message)
            return False
        self._toast(f"{config.responsive_mode.label} mode")
        self._notify()
        return True

    # ---- Selection API (called by View) ----
    def select_module(self, module_id: ModuleId) -> None:
        if self.controller.select(module_id):
            self._selection_changed()

    def deselect(self) -> None:
        if self.controller.deselect():
            self._selection_changed()

    @property
    def selected_id(self) -> Optional[ModuleId]:
        return self.controller.selected_id

    # ---- Module commands ----
    def add_module(
        self,
        *,
        col: Any = 2,
        row: Any = 2,
        kind: str = "box",
        color: str = DEFAULT_COLOR,
        transparent: bool = False,
        border_color: str = DEFAULT_BORDER_COLOR,
        border_width: Any = 0,
    ) -> ModuleId:
        module_id = self.controller.create_module(
            col=col,
            row=row,
            kind=kind,
            color=color,
            transparent=transparent,
            border_color=border_color,
            border_width=border_width,
        )
        module = self.controller.module(module_id)
        if module is not None:
            self._toast(f"{module.label} {module.kind.value} module added")
        self._notify()
        return module_id

    def edit_selected(self, field_name: str, value: Any) -> bool:
        """Apply an intermediate value to the selected module without recording history."""
        module_id = self.selected_id
        if module_id is None:
            return False
        changed = self.controller.update_module(module_id, {field_name: value}, commit=False)
        if changed:
            self._notify()
        return changed

    def commit_selected(self) -> bool:
        """Record the finished edit of the selected module, if one is pending."""
        if self.selected_id is None:
            return False
        return self.controller.commit_edit()

    def set_selected_field(self, field_name: str, value: Any) -> bool:
        """Apply and commit a discrete edit (type, group, transparency toggle)."""
        module_id = self.selected_id
        if module_id is None:
            return False
        changed = self.controller.update_module(module_id, {field_name: value}, commit=True)
        if changed:
            self._notify()
        return changed

    def delete_module(self, module_id: ModuleId) -> bool:
        was_selected = self.selected_id == module_id
        deleted = self.controller.delete_module(module_id)
        if deleted:
            if was_selected:
                self._selection_changed()
            self._notify()
        return deleted

    def delete_selected(self) -> bool:
        module_id = self.selected_id
        if module_id is None:
            return False
        return self.delete_module(module_id)

    def clear_all(self) -> bool:
        if self.on_confirm and not self.on_confirm("Delete all modules?"):
            return False
        had_selection = self.selected_id is not None
        self.controller.clear_all()
        if had_selection:
            self._selection_changed()
        self._toast("All modules deleted")
        self._notify()
        return True

    # ---- Drag & drop ----
    def drag_start(self, index: int) -> None:
        order = self.controller.order(self.viewport)
        if not 0 <= index < len(order):
            self._reset_drag()
            return
        self._drag_index = index
        self._drag_id = order[index]

    def drag_end(self) -> None:
        self._reset_drag()

    def drop(self, index: int) -> bool:
        """Finish a drag on slot ``index`` of the active order."""
        drag_id, drag_index = self._drag_id, self._drag_index
        self._reset_drag()
        if drag_id is None or drag_index == index:
            return False
        moved = self.controller.reorder(self.viewport, drag_id, index)
        if moved:
            self._notify()
        return moved

    @property
    def dragging(self) -> bool:
        return self._drag_id is not None

    def set_mobile_order_lock(self, locked: bool) -> None:
        if not self.controller.set_mobile_order_lock(locked):
            return
        if locked:
            self._toast("Mobile order now follows the desktop order.")
        else:
            self._toast("Mobile order sync released.")
        self._notify()

    # ---- History ----
    def undo(self) -> bool:
        return self._restore(self.controller.undo)

    def redo(self) -> bool:
        return self._restore(self.controller.redo)

    @property
    def can_undo(self) -> bool:
        return self.controller.can_undo

    @property
    def can_redo(self) -> bool:
        return self.controller.can_redo

    # ------------------------------------------------------------------
    # DTOs for the view
    # ------------------------------------------------------------------
    def module_rows(self) -> List[ModuleRow]:
        """Canvas rows in active-viewport order."""
        config = self.controller.config
        selected = self.selected_id
        rows: List[ModuleRow] = []
        for index, module in enumerate(self.controller.ordered_modules(self.viewport)):
            if self.viewport is Viewport.DESKTOP:
                span = desktop_span(module, config.desktop_columns)
            else:
                span = self.controller.mobile_span(module)
            rows.append(
                {
                    "index": index,
                    "id": module.id,
                    "span": span,
                    "row": module.row,
                    "label": module.label,
                    "type": module.kind.value,
                    "group_id": module.group_id or "",
                    "selected": module.id == selected,
                    "warning": self.viewport is Viewport.MOBILE
                    and self.controller.has_span_warning(module),
                    "background": _background(module),
                    "outline": _outline(module),
                }
            )
        return rows

    def grid_style(self) -> Dict[str, int]:
        config = self.controller.config
        return {
            "columns": config.columns_for(self.viewport),
            "gap": config.gap_for(self.viewport),
        }

    def edit_panel(self) -> Optional[Dict[str, Any]]:
        """Form values for the selected module, or None to hide the panel."""
        module = self.controller.selected_module()
        if module is None:
            return None
        config = self.controller.config
        return {
            "type": module.kind.value,
            "group_id": module.group_id or "",
            "col": desktop_span(module, config.desktop_columns),
            "col_max": config.desktop_columns,
            "row": module.row,
            "mobile_col": "" if module.mobile_col is None
            else max(1, min(module.mobile_col, config.target_columns)),
            "mobile_col_max": config.target_columns,
            "color": module.color,
            "transparent": module.transparent,
            "border_color": module.border_color,
            "border_width": module.border_width,
            "mobile_span_hint": self.mobile_span_hint(),
        }

    def mobile_span_hint(self) -> str:
        module = self.controller.selected_module()
        if module is None:
            return ""
        config = self.controller.config
        auto = auto_mobile_span(module.col, config.desktop_columns, config.target_columns)
        return f"auto: {auto} col ({module.col}/{config.desktop_columns} × {config.target_columns})"

    def stats(self) -> Dict[str, int]:
        return self.controller.stats()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _restore(self, step: Callable[[], bool]) -> bool:
        before = self.selected_id
        if not step():
            return False
        if self.selected_id != before:
            self._selection_changed()
        self._notify()
        return True

    def _reset_drag(self) -> None:
        self._drag_index = None
        self._drag_id = None

    def _selection_changed(self) -> None:
        if self.on_selection_changed:
            self.on_selection_changed(self.selected_id)

    def _notify(self) -> None:
        if self.on_state_changed:
            self.on_state_changed()

    def _toast(self, message: str) -> None:
        logger.debug("Toast: %s", message)
        if self.on_toast:
            self.on_toast(message)


def _background(module: Module) -> str:
    if module.kind is not ModuleType.BOX:
        return ""
    return "transparent" if module.transparent else module.color


def _outline(module: Module) -> str:
    if module.border_width <= 0:
        return ""
    return f"{module.border_width}px solid {module.border_color}"
