from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..app.controller import LayoutController
from ..domain.errors import UseCaseError

TABS = ("html", "css")


@dataclass
class CodeVM:
    """Generated-code panel: active tab, current text, copy command."""

    controller: LayoutController = field(default_factory=LayoutController)
    on_copy: Optional[Callable[[str], None]] = None
    on_toast: Optional[Callable[[str], None]] = None

    active_tab: str = "html"

    def switch_tab(self, tab: str) -> None:
        key = (tab or "").strip().lower()
        if key not in TABS:
            raise ValueError(f"Unsupported code tab: {tab}")
        self.active_tab = key

    def code(self) -> str:
        """Current text of the active tab; export failures yield an empty panel."""
        try:
            return self.controller.export_code(self.active_tab)
        except UseCaseError as exc:
            self._toast(exc.message)
            return ""

    def cmd_copy(self) -> bool:
        text = self.code()
        if not text or not self.on_copy:
            return False
        self.on_copy(text)
        self._toast(f"{self.active_tab.upper()} code copied!")
        return True

    def _toast(self, message: str) -> None:
        if self.on_toast:
            self.on_toast(message)
