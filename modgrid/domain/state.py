"""Layout state owned by the controller and its immutable history snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .entities import LayoutConfig, Module, ModuleId, Viewport
from .ordering import OrderLists


@dataclass(frozen=True)
class LayoutSnapshot:
    """Point-in-time copy of modules, both orders, and the selection.

    Configuration and the mobile-order lock are not part of a snapshot.
    """

    modules: Tuple[Module, ...]
    desktop_order: Tuple[ModuleId, ...]
    mobile_order: Tuple[ModuleId, ...]
    selected_id: Optional[ModuleId] = None

    def module_ids(self) -> Tuple[ModuleId, ...]:
        return tuple(m.id for m in self.modules)


@dataclass
class LayoutState:
    """Mutable working state of one designer session."""

    config: LayoutConfig = field(default_factory=LayoutConfig)
    modules: Dict[ModuleId, Module] = field(default_factory=dict)
    orders: OrderLists = field(default_factory=OrderLists)
    selected_id: Optional[ModuleId] = None

    # ---- Read side ----
    def ordered_modules(self, viewport: Viewport) -> List[Module]:
        """Modules in ``viewport`` order; ids without a backing module are skipped."""
        return [
            self.modules[mid]
            for mid in self.orders.active(viewport)
            if mid in self.modules
        ]

    def selected_module(self) -> Optional[Module]:
        if self.selected_id is None:
            return None
        module = self.modules.get(self.selected_id)
        if module is None:
            self.selected_id = None
        return module

    def select(self, module_id: Optional[ModuleId]) -> bool:
        """Select by id; unknown ids clear the selection. Returns True on change."""
        if module_id is not None and module_id not in self.modules:
            module_id = None
        if module_id == self.selected_id:
            return False
        self.selected_id = module_id
        return True

    # ---- History ----
    def snapshot(self) -> LayoutSnapshot:
        selected = self.selected_id if self.selected_id in self.modules else None
        return LayoutSnapshot(
            modules=tuple(self.modules.values()),
            desktop_order=tuple(self.orders.desktop),
            mobile_order=tuple(self.orders.mobile),
            selected_id=selected,
        )

    def restore(self, snapshot: LayoutSnapshot) -> None:
        self.modules = {m.id: m for m in snapshot.modules}
        self.orders.desktop = list(snapshot.desktop_order)
        self.orders.mobile = list(snapshot.mobile_order)
        selected = snapshot.selected_id
        self.selected_id = selected if selected in self.modules else None


__all__ = ["LayoutSnapshot", "LayoutState"]
