"""Use case for removing every module at once."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import HistoryPort
from ..domain.registry import ModuleRegistry
from ..domain.state import LayoutState


@dataclass
class ClearModules:
    """Delete every module; an already empty layout records nothing."""

    registry: ModuleRegistry
    history: HistoryPort

    def __call__(self, state: LayoutState) -> int:
        removed = self.registry.clear(state)
        if removed:
            self.history.checkpoint(state.snapshot())
        return removed
