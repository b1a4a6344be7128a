from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any, Callable, Mapping, Optional

from ..app.controller import LayoutController
from ..domain.entities import LayoutConfig, ResponsiveMode
from ..domain.errors import UseCaseError

_NUMERIC_KEYS = ("desktop_columns", "target_columns", "desktop_gap", "mobile_gap")


class GridSettingsVM:
    """Grid settings form state; values are clamped by the layout config."""

    def __init__(
        self,
        controller: LayoutController,
        *,
        on_change: Optional[Callable[[LayoutConfig], None]] = None,
        on_toast: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.controller = controller
        self.on_change = on_change
        self.on_toast = on_toast

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def config(self) -> LayoutConfig:
        return self.controller.config

    @property
    def desktop_columns(self) -> int:
        return self.config.desktop_columns

    @desktop_columns.setter
    def desktop_columns(self, value: Any) -> None:
        self._apply(desktop_columns=value)

    @property
    def target_columns(self) -> int:
        return self.config.target_columns

    @target_columns.setter
    def target_columns(self, value: Any) -> None:
        self._apply(target_columns=value)

    @property
    def desktop_gap(self) -> int:
        return self.config.desktop_gap

    @desktop_gap.setter
    def desktop_gap(self, value: Any) -> None:
        self._apply(desktop_gap=value)

    @property
    def mobile_gap(self) -> int:
        return self.config.mobile_gap

    @mobile_gap.setter
    def mobile_gap(self, value: Any) -> None:
        self._apply(mobile_gap=value)

    @property
    def responsive_mode(self) -> ResponsiveMode:
        return self.config.responsive_mode

    # ------------------------------------------------------------------
    def mode_hint(self) -> str:
        return f"{self.desktop_columns} columns → reflow into {self.target_columns} columns"

    def apply_dict(self, payload: Mapping[str, Any]) -> bool:
        """Apply a flat settings mapping; returns True when the config changed."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {f.name for f in fields(LayoutConfig)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: payload[key] for key in _NUMERIC_KEYS if key in payload}
        if "responsive_mode" in payload:
            updates["responsive_mode"] = payload["responsive_mode"]
        if not updates:
            return False
        return self._apply(**updates)

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["responsive_mode"] = self.config.responsive_mode.value
        return snapshot

    def _apply(self, **changes: Any) -> bool:
        """Push changes to the controller; rejected modes are toasted, not raised."""
        before = self.controller.config
        try:
            config = self.controller.apply_config(**changes)
        except UseCaseError as exc:
            if self.on_toast:
                self.on_toast(exc.message)
            return False
        if config == before:
            return False
        if self.on_change:
            self.on_change(config)
        return True
