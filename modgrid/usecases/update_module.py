"""Use case for editing the fields of one module.

Field widgets emit intermediate values while the user types or drags a slider;
only the finished edit becomes an undo step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..domain.entities import ModuleId
from ..domain.ports import HistoryPort
from ..domain.registry import ModuleRegistry
from ..domain.state import LayoutState


@dataclass
class UpdateModule:
    """Field edits on one module.

    Intermediate values (``commit=False``) change state without a checkpoint
    and mark the edit as pending; the finished edit is recorded either by
    passing ``commit=True`` or by a later call to :meth:`commit`.
    """

    registry: ModuleRegistry
    history: HistoryPort
    _pending: bool = field(default=False, init=False, repr=False)

    @property
    def pending(self) -> bool:
        return self._pending

    def __call__(
        self,
        state: LayoutState,
        module_id: ModuleId,
        patch: Mapping[str, Any],
        *,
        commit: bool = True,
    ) -> bool:
        """Apply ``patch``; returns False when nothing changed.

        A committed change records one checkpoint, which also covers any
        pending intermediate values.
        """
        changed = self.registry.update(state, module_id, patch)
        if not changed:
            return False
        if commit:
            self.history.checkpoint(state.snapshot())
            self._pending = False
        else:
            self._pending = True
        return True

    def commit(self, state: LayoutState) -> bool:
        """Record pending intermediate edits. No-op when nothing is pending."""
        if not self._pending:
            return False
        self.history.checkpoint(state.snapshot())
        self._pending = False
        return True

    def discard_pending(self) -> None:
        self._pending = False
