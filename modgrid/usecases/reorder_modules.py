"""Use case for finishing a drag on the canvas.

The reorder itself lives in ``domain.ordering``; this wrapper installs the new
order on the active viewport and records one undo step per effective drop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.entities import ModuleId, Viewport
from ..domain.ordering import reorder
from ..domain.ports import HistoryPort
from ..domain.state import LayoutState

logger = logging.getLogger(__name__)


@dataclass
class ReorderModules:
    """Drop a dragged module (with its group) onto a slot of the active order."""

    history: HistoryPort

    def __call__(
        self,
        state: LayoutState,
        viewport: Viewport,
        dragged_id: ModuleId,
        target_index: int,
    ) -> bool:
        current = state.orders.active(viewport)
        new_order = reorder(current, state.modules, dragged_id, target_index)
        if new_order is None:
            logger.debug(
                "Ignored drop of %s onto slot %s (%s)", dragged_id, target_index, viewport.value
            )
            return False
        state.orders.commit(viewport, new_order)
        self.history.checkpoint(state.snapshot())
        return True
