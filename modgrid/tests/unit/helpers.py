from __future__ import annotations

from typing import Dict, Iterable, List

from modgrid.app.controller import LayoutController
from modgrid.domain.entities import LayoutConfig, ModuleId, Viewport


def make_controller(desktop_columns: int = 6, target_columns: int = 2) -> LayoutController:
    return LayoutController(
        LayoutConfig(desktop_columns=desktop_columns, target_columns=target_columns)
    )


def add_modules(controller: LayoutController, names: Iterable[str]) -> Dict[str, ModuleId]:
    """Create one 1x1 module per name; returns name -> id."""
    return {name: controller.create_module(col=1, row=1) for name in names}


def order_names(
    controller: LayoutController, ids: Dict[str, ModuleId], viewport: Viewport
) -> List[str]:
    by_id = {mid: name for name, mid in ids.items()}
    return [by_id[mid] for mid in controller.order(viewport)]


__all__ = ["add_modules", "make_controller", "order_names"]
