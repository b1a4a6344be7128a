"""Use case for changing grid settings (columns, gaps, responsive mode)."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any

from ..domain.entities import LayoutConfig, ResponsiveMode
from ..domain.errors import UseCaseError
from ..domain.layout_utils import coerce_int
from ..domain.state import LayoutState

logger = logging.getLogger(__name__)

_NUMERIC_DEFAULTS = {
    "desktop_columns": 1,
    "target_columns": 1,
    "desktop_gap": 0,
    "mobile_gap": 0,
}


class UpdateLayoutConfig:
    """Replace the grid configuration; stored module spans are left untouched.

    Only the reflow responsive mode is functional; other modes are rejected
    with ``UNSUPPORTED_MODE`` and leave the configuration unchanged.
    """

    def __call__(self, state: LayoutState, **changes: Any) -> LayoutConfig:
        known = {f.name for f in fields(LayoutConfig)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown layout setting(s): {', '.join(sorted(unknown))}")

        values = {}
        for name, value in changes.items():
            if name == "responsive_mode":
                values[name] = self._resolve_mode(value)
            else:
                values[name] = coerce_int(value, _NUMERIC_DEFAULTS[name])

        config = replace(state.config, **values)
        if config != state.config:
            logger.debug("Layout config changed: %s", config)
        state.config = config
        return config

    @staticmethod
    def _resolve_mode(value: Any) -> ResponsiveMode:
        token = value.value if isinstance(value, ResponsiveMode) else str(value or "").strip().lower()
        try:
            mode = ResponsiveMode(token)
        except ValueError:
            raise UseCaseError("INVALID_MODE", f"Unknown responsive mode: {value}")
        if not mode.is_supported:
            raise UseCaseError(
                "UNSUPPORTED_MODE",
                "This mode is not supported by the current architecture.",
            )
        return mode
