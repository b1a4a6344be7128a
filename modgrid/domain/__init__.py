"""Domain package exports for value objects, layout state, and algorithms."""

from .entities import (
    LayoutConfig,
    Module,
    ModuleId,
    ModuleType,
    ResponsiveMode,
    Viewport,
)
from .errors import UseCaseError
from .history import HistoryStack
from .ordering import OrderLists, move_set, reorder
from .registry import ModuleIdAllocator, ModuleRegistry
from .spans import auto_mobile_span, has_span_warning, mobile_span
from .state import LayoutSnapshot, LayoutState

__all__ = [
    "HistoryStack",
    "LayoutConfig",
    "LayoutSnapshot",
    "LayoutState",
    "Module",
    "ModuleId",
    "ModuleIdAllocator",
    "ModuleRegistry",
    "ModuleType",
    "OrderLists",
    "ResponsiveMode",
    "UseCaseError",
    "Viewport",
    "auto_mobile_span",
    "has_span_warning",
    "mobile_span",
    "move_set",
    "reorder",
]
