from __future__ import annotations

from typing import Protocol

from .state import LayoutSnapshot, LayoutState


# ---- Ports (Hexagonal boundaries) ----
class HistoryPort(Protocol):
    """Receives one snapshot per committed user action."""

    def checkpoint(self, snapshot: LayoutSnapshot) -> None: ...


class CodeExportPort(Protocol):
    """Renders the layout into markup and stylesheet text."""

    def render_html(self, state: LayoutState) -> str: ...
    def render_css(self, state: LayoutState) -> str: ...
