"""Use case for deleting a single module."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import ModuleId
from ..domain.ports import HistoryPort
from ..domain.registry import ModuleRegistry
from ..domain.state import LayoutState


@dataclass
class DeleteModule:
    """Delete a single module; members of its group stay."""

    registry: ModuleRegistry
    history: HistoryPort

    def __call__(self, state: LayoutState, module_id: ModuleId) -> bool:
        if not self.registry.delete(state, module_id):
            return False
        self.history.checkpoint(state.snapshot())
        return True
