"""Mobile span derivation for the reflow responsive mode.

A module keeps its proportional footprint across the breakpoint: a module
spanning half the desktop grid spans half the mobile grid, rounded half away
from zero, never less than one column and never more than the mobile grid.
A manual ``mobile_col`` always wins over the derived value.
"""

from __future__ import annotations

from .entities import Module
from .layout_utils import clamp


def auto_mobile_span(col: int, desktop_columns: int, target_columns: int) -> int:
    """Derive a mobile span from a desktop span.

    The ratio is evaluated in integer arithmetic: ``floor(x + 1/2)`` with
    ``x = col * target / desktop`` equals ``(2 * col * target + desktop) //
    (2 * desktop)`` for non-negative operands.
    """
    desktop_columns = max(1, desktop_columns)
    target_columns = max(1, target_columns)
    col = clamp(col, 1, desktop_columns)
    raw = (2 * col * target_columns + desktop_columns) // (2 * desktop_columns)
    return clamp(raw, 1, target_columns)


def mobile_span(module: Module, desktop_columns: int, target_columns: int) -> int:
    target_columns = max(1, target_columns)
    if module.mobile_col is not None:
        return clamp(module.mobile_col, 1, target_columns)
    return auto_mobile_span(module.col, desktop_columns, target_columns)


def desktop_span(module: Module, desktop_columns: int) -> int:
    return clamp(module.col, 1, max(1, desktop_columns))


def has_span_warning(module: Module, target_columns: int) -> bool:
    """True when automatic derivation is shrinking a module wider than the mobile grid."""
    return module.col > target_columns and module.mobile_col is None


__all__ = ["auto_mobile_span", "desktop_span", "has_span_warning", "mobile_span"]
