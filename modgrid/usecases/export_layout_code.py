"""Use case for producing the HTML or CSS text of the current layout.

Exporter failures are mapped into `UseCaseError` so the code panel can show a
message instead of crashing.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.errors import UseCaseError
from ..domain.ports import CodeExportPort
from ..domain.state import LayoutState

FORMATS = ("html", "css")


@dataclass
class ExportLayoutCode:
    exporter: CodeExportPort

    def __call__(self, state: LayoutState, fmt: str) -> str:
        """Render ``fmt`` (``html`` or ``css``, case-insensitive).

        Raises:
            UseCaseError: ``EXPORT_FAILED`` for unknown formats or when the
                exporter raises.
        """
        key = (fmt or "").strip().lower()
        if key not in FORMATS:
            raise UseCaseError("EXPORT_FAILED", f"Unsupported export format: {fmt}")
        try:
            if key == "html":
                return self.exporter.render_html(state)
            return self.exporter.render_css(state)
        except UseCaseError:
            raise
        except Exception as exc:
            raise UseCaseError("EXPORT_FAILED", str(exc)) from exc
