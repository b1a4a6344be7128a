"""Domain value objects shared across use-cases, adapters, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

ModuleId = int

DESKTOP_COLUMNS_RANGE = (1, 12)
TARGET_COLUMNS_RANGE = (1, 12)
GAP_RANGE = (0, 50)
ROW_RANGE = (1, 99)
BORDER_WIDTH_RANGE = (0, 20)

DEFAULT_COLOR = "#8c6c3c"
DEFAULT_BORDER_COLOR = "#000000"


class ModuleType(str, Enum):
    """Content variant of a module; only affects markup, never layout."""

    BOX = "box"
    TEXT = "text"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: Any) -> Optional["ModuleType"]:
        """Return the matching member for a token, or None when unknown."""
        if isinstance(value, cls):
            return value
        token = str(value or "").strip().lower()
        for member in cls:
            if member.value == token:
                return member
        return None


class Viewport(str, Enum):
    """Which order list and column count is active."""

    DESKTOP = "desktop"
    MOBILE = "mobile"


class ResponsiveMode(str, Enum):
    """Strategy for mapping the desktop grid onto the mobile grid."""

    REFLOW = "reflow"
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def is_supported(self) -> bool:
        return self is ResponsiveMode.REFLOW


_MODE_LABELS: Dict[ResponsiveMode, str] = {
    ResponsiveMode.REFLOW: "Reflow",
    ResponsiveMode.CENTER: "Keep centered",
    ResponsiveMode.LEFT: "Keep left",
    ResponsiveMode.RIGHT: "Keep right",
    ResponsiveMode.CUSTOM: "Custom",
}


@dataclass(frozen=True)
class Module:
    """A placeable layout unit.

    Instances are immutable; registry edits replace the stored value so that
    history snapshots can hold references without copying.
    """

    id: ModuleId
    """Session-unique identifier assigned at creation."""
    col: int
    """Desktop column span."""
    row: int
    """Row span, shared by both viewports."""
    mobile_col: Optional[int] = None
    """Manual mobile span; None derives the span from ``col``."""
    kind: ModuleType = ModuleType.BOX
    group_id: Optional[str] = None
    """Ordering-affinity tag; modules sharing it move together."""
    color: str = DEFAULT_COLOR
    transparent: bool = False
    border_color: str = DEFAULT_BORDER_COLOR
    border_width: int = 0

    @property
    def has_mobile_override(self) -> bool:
        return self.mobile_col is not None

    @property
    def label(self) -> str:
        return f"{self.col}×{self.row}"

    def to_dict(self) -> Dict[str, Any]:
        """Flat mapping with the external field names used by the renderer."""
        return {
            "id": self.id,
            "col": self.col,
            "row": self.row,
            "mobileCol": self.mobile_col,
            "type": self.kind.value,
            "groupId": self.group_id,
            "color": self.color,
            "transparent": self.transparent,
            "borderColor": self.border_color,
            "borderWidth": self.border_width,
        }


@dataclass(frozen=True)
class LayoutConfig:
    """Process-wide grid configuration.

    Values are clamped on construction; changing columns never rewrites the
    spans stored on modules.
    """

    desktop_columns: int = 6
    target_columns: int = 2
    desktop_gap: int = 10
    mobile_gap: int = 10
    responsive_mode: ResponsiveMode = ResponsiveMode.REFLOW

    def __post_init__(self) -> None:
        object.__setattr__(self, "desktop_columns", _bounded(self.desktop_columns, DESKTOP_COLUMNS_RANGE))
        object.__setattr__(self, "target_columns", _bounded(self.target_columns, TARGET_COLUMNS_RANGE))
        object.__setattr__(self, "desktop_gap", _bounded(self.desktop_gap, GAP_RANGE))
        object.__setattr__(self, "mobile_gap", _bounded(self.mobile_gap, GAP_RANGE))
        if not isinstance(self.responsive_mode, ResponsiveMode):
            object.__setattr__(self, "responsive_mode", ResponsiveMode(str(self.responsive_mode).strip().lower()))

    def columns_for(self, viewport: Viewport) -> int:
        return self.desktop_columns if viewport is Viewport.DESKTOP else self.target_columns

    def gap_for(self, viewport: Viewport) -> int:
        return self.desktop_gap if viewport is Viewport.DESKTOP else self.mobile_gap


def _bounded(value: Any, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}.")
    low, high = bounds
    return max(low, min(value, high))


__all__ = [
    "BORDER_WIDTH_RANGE",
    "DEFAULT_BORDER_COLOR",
    "DEFAULT_COLOR",
    "DESKTOP_COLUMNS_RANGE",
    "GAP_RANGE",
    "LayoutConfig",
    "Module",
    "ModuleId",
    "ModuleType",
    "ROW_RANGE",
    "ResponsiveMode",
    "TARGET_COLUMNS_RANGE",
    "Viewport",
]
