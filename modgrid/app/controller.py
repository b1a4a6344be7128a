"""Owner of the layout state, its history, and the use-case objects.

The controller is the single writer of :class:`LayoutState`. View models call
its command methods; renderers and the code exporter only use its read
accessors. Undo/redo bypass the use cases and restore a stored snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..adapters.markup_export import MarkupExporter
from ..domain.entities import LayoutConfig, Module, ModuleId, Viewport
from ..domain.history import DEFAULT_HISTORY_CAPACITY, HistoryStack
from ..domain.ports import CodeExportPort
from ..domain.registry import ModuleIdAllocator, ModuleRegistry
from ..domain.spans import has_span_warning, mobile_span
from ..domain.state import LayoutSnapshot, LayoutState
from ..usecases.clear_modules import ClearModules
from ..usecases.create_module import CreateModule
from ..usecases.delete_module import DeleteModule
from ..usecases.export_layout_code import ExportLayoutCode
from ..usecases.reorder_modules import ReorderModules
from ..usecases.set_mobile_order_lock import SetMobileOrderLock
from ..usecases.update_layout_config import UpdateLayoutConfig
from ..usecases.update_module import UpdateModule

logger = logging.getLogger(__name__)

# Whether a command records a history checkpoint. "commit" means only when the
# caller marks the edit as finished.
CHECKPOINT_POLICY: Dict[str, object] = {
    "create": True,
    "delete": True,
    "clear": True,
    "reorder": True,
    "toggle_lock": True,
    "update": "commit",
    "select": False,
    "deselect": False,
    "switch_view": False,
    "config": False,
    "responsive_mode": False,
    "export": False,
    "undo": False,
    "redo": False,
}


def requires_checkpoint(command: str, *, committed: bool = False) -> bool:
    policy = CHECKPOINT_POLICY.get(command)
    if policy is None:
        raise ValueError(f"Unknown command: {command}")
    if policy == "commit":
        return committed
    return bool(policy)


class LayoutController:
    """Command entry points and read accessors over one designer session."""

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        *,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        exporter: Optional[CodeExportPort] = None,
        allocator: Optional[ModuleIdAllocator] = None,
    ) -> None:
        self.state = LayoutState(config=config or LayoutConfig())
        self.history: HistoryStack[LayoutSnapshot] = HistoryStack(history_capacity)
        self.registry = ModuleRegistry(allocator)

        self.uc_create = CreateModule(self.registry, self.history)
        self.uc_update = UpdateModule(self.registry, self.history)
        self.uc_delete = DeleteModule(self.registry, self.history)
        self.uc_clear = ClearModules(self.registry, self.history)
        self.uc_reorder = ReorderModules(self.history)
        self.uc_lock = SetMobileOrderLock(self.history)
        self.uc_config = UpdateLayoutConfig()
        self.uc_export = ExportLayoutCode(exporter or MarkupExporter())

        # Baseline entry so the first edit can be undone.
        self.history.checkpoint(self.state.snapshot())

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def config(self) -> LayoutConfig:
        return self.state.config

    @property
    def selected_id(self) -> Optional[ModuleId]:
        return self.state.selected_id if self.state.selected_id in self.state.modules else None

    @property
    def mobile_order_locked(self) -> bool:
        return self.state.orders.locked

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def module(self, module_id: ModuleId) -> Optional[Module]:
        return self.registry.get(self.state, module_id)

    def modules(self) -> List[Module]:
        return self.registry.all(self.state)

    def ordered_modules(self, viewport: Viewport) -> List[Module]:
        return self.state.ordered_modules(Viewport(viewport))

    def order(self, viewport: Viewport) -> List[ModuleId]:
        return list(self.state.orders.active(Viewport(viewport)))

    def selected_module(self) -> Optional[Module]:
        return self.state.selected_module()

    def mobile_span(self, module: Module) -> int:
        return mobile_span(module, self.config.desktop_columns, self.config.target_columns)

    def has_span_warning(self, module: Module) -> bool:
        return has_span_warning(module, self.config.target_columns)

    def stats(self) -> Dict[str, int]:
        return {
            "columns": self.config.desktop_columns,
            "gap": self.config.desktop_gap,
            "modules": len(self.state.modules),
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def create_module(self, spec: Optional[Mapping[str, Any]] = None, **fields: Any) -> ModuleId:
        payload = dict(spec or {})
        payload.update(fields)
        return self.uc_create(self.state, payload)

    def update_module(
        self,
        module_id: ModuleId,
        patch: Mapping[str, Any],
        *,
        commit: bool = True,
    ) -> bool:
        return self.uc_update(self.state, module_id, patch, commit=commit)

    def commit_edit(self) -> bool:
        """Record the result of preceding uncommitted field edits, if any."""
        return self.uc_update.commit(self.state)

    def delete_module(self, module_id: ModuleId) -> bool:
        return self.uc_delete(self.state, module_id)

    def clear_all(self) -> int:
        return self.uc_clear(self.state)

    def reorder(self, viewport: Viewport, dragged_id: ModuleId, target_index: int) -> bool:
        return self.uc_reorder(self.state, Viewport(viewport), dragged_id, target_index)

    def set_mobile_order_lock(self, locked: bool) -> bool:
        return self.uc_lock(self.state, locked)

    def select(self, module_id: Optional[ModuleId]) -> bool:
        return self.state.select(module_id)

    def deselect(self) -> bool:
        return self.state.select(None)

    def apply_config(self, **changes: Any) -> LayoutConfig:
        return self.uc_config(self.state, **changes)

    def set_responsive_mode(self, mode: Any) -> LayoutConfig:
        return self.uc_config(self.state, responsive_mode=mode)

    def export_code(self, fmt: str) -> str:
        return self.uc_export(self.state, fmt)

    def undo(self) -> bool:
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.state.restore(snapshot)
        self.uc_update.discard_pending()
        logger.debug("Undo -> entry %d", self.history.cursor)
        return True

    def redo(self) -> bool:
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self.state.restore(snapshot)
        self.uc_update.discard_pending()
        logger.debug("Redo -> entry %d", self.history.cursor)
        return True


__all__ = ["CHECKPOINT_POLICY", "LayoutController", "requires_checkpoint"]
