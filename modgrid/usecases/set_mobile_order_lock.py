"""Use case for locking the mobile order to the desktop order.

While locked, every desktop reorder is mirrored onto the mobile order list.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import HistoryPort
from ..domain.state import LayoutState


@dataclass
class SetMobileOrderLock:
    """Lock (mirror desktop onto mobile) or unlock the mobile order."""

    history: HistoryPort

    def __call__(self, state: LayoutState, locked: bool) -> bool:
        """Returns True when the flag changed; only changes are recorded."""
        if not state.orders.set_locked(locked):
            return False
        self.history.checkpoint(state.snapshot())
        return True
