"""Use case for adding a module to the layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..domain.entities import ModuleId
from ..domain.ports import HistoryPort
from ..domain.registry import ModuleRegistry
from ..domain.state import LayoutState


@dataclass
class CreateModule:
    """Create a module from a field mapping and record it as one undo step."""

    registry: ModuleRegistry
    history: HistoryPort

    def __call__(self, state: LayoutState, spec: Optional[Mapping[str, Any]] = None) -> ModuleId:
        """Return the new module id.

        Args:
            state: Layout state to mutate.
            spec: Field values; missing or invalid spans fall back to 2x2 and
                out-of-range values are clamped.

        Side Effects:
            Appends the id to both order lists and checkpoints history.
        """
        module_id = self.registry.create(state, spec)
        self.history.checkpoint(state.snapshot())
        return module_id
