"""Per-viewport order lists and the group-aware drag reorder.

Groups model "keep these modules adjacent under reorder": dragging any member
relocates every member of its group as one contiguous block, preserving the
members' relative order. Dropping onto the dragged module itself or onto one of
its group mates is a no-op, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence

from .entities import Module, ModuleId, Viewport

logger = logging.getLogger(__name__)


def move_set(
    order: Sequence[ModuleId],
    modules: Mapping[ModuleId, Module],
    dragged_id: ModuleId,
) -> List[ModuleId]:
    """Return the ids that travel with ``dragged_id``, in their current order."""
    dragged = modules.get(dragged_id)
    if dragged is None or dragged.group_id is None:
        return [dragged_id]
    group_id = dragged.group_id
    return [
        mid
        for mid in order
        if mid in modules and modules[mid].group_id == group_id
    ]


def reorder(
    order: Sequence[ModuleId],
    modules: Mapping[ModuleId, Module],
    dragged_id: ModuleId,
    target_index: int,
) -> Optional[List[ModuleId]]:
    """Move ``dragged_id`` (and its group) in front of the module at ``target_index``.

    Returns the new order, or None when the drop is a no-op: unknown dragged
    module, target index outside the list, or a target inside the move-set.
    """
    if dragged_id not in modules or dragged_id not in order:
        return None
    if not 0 <= target_index < len(order):
        return None

    moving = move_set(order, modules, dragged_id)
    target_id = order[target_index]
    if target_id in moving:
        return None

    moving_ids = set(moving)
    remaining = [mid for mid in order if mid not in moving_ids]
    insert_at = remaining.index(target_id)
    return remaining[:insert_at] + moving + remaining[insert_at:]


@dataclass
class OrderLists:
    """Desktop and mobile order lists plus the mobile-order lock."""

    desktop: List[ModuleId] = field(default_factory=list)
    mobile: List[ModuleId] = field(default_factory=list)
    locked: bool = False

    def active(self, viewport: Viewport) -> List[ModuleId]:
        return self.desktop if viewport is Viewport.DESKTOP else self.mobile

    def append(self, module_id: ModuleId) -> None:
        self.desktop.append(module_id)
        self.mobile.append(module_id)

    def discard(self, module_id: ModuleId) -> None:
        self.desktop = [mid for mid in self.desktop if mid != module_id]
        self.mobile = [mid for mid in self.mobile if mid != module_id]

    def clear(self) -> None:
        self.desktop = []
        self.mobile = []

    def commit(self, viewport: Viewport, order: Iterable[ModuleId]) -> None:
        """Install a new order for ``viewport``; desktop changes mirror while locked."""
        if viewport is Viewport.DESKTOP:
            self.desktop = list(order)
            if self.locked:
                self.mobile = list(self.desktop)
        else:
            self.mobile = list(order)

    def set_locked(self, locked: bool) -> bool:
        """Change the lock; locking copies the desktop order onto mobile.

        Returns True when the flag changed.
        """
        locked = bool(locked)
        if locked == self.locked:
            return False
        self.locked = locked
        if locked:
            self.mobile = list(self.desktop)
        logger.debug("Mobile order lock %s", "enabled" if locked else "disabled")
        return True


__all__ = ["OrderLists", "move_set", "reorder"]
