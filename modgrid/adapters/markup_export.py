"""HTML/CSS generation for a designed layout.

Markup follows the desktop order; every module gets a positional class
``module-{n}`` that the stylesheet targets. The mobile media block reuses those
classes and expresses the mobile order through ``order:``.
"""

from __future__ import annotations

from typing import Dict, List

from ..domain.entities import Module, ModuleType, ResponsiveMode, Viewport
from ..domain.ports import CodeExportPort
from ..domain.spans import desktop_span, mobile_span
from ..domain.state import LayoutState

MOBILE_BREAKPOINT_PX = 768

_TEXT_PLACEHOLDER = "       <p>Lorem ipsum...</p>"
_IMAGE_PLACEHOLDER = '       <img src="https://via.placeholder.com/150" alt="placeholder">'

_BASE_RULES = """.module {
  min-height: 60px;
}

.module.type-image {
  background: #e0e0e0;
}
.module.type-image img {
  width: 100%;
  height: 100%;
  object-fit: cover;
  display: block;
}
.module.type-text {
  background: #ffffff;
  padding: 10px;
}"""


def module_classes(module: Module, position: int) -> str:
    """Class attribute for the module rendered at 1-based ``position``."""
    classes = f"module module-{position} type-{module.kind.value}"
    if module.group_id:
        classes += f" group-{module.group_id}"
    return classes


def background(module: Module) -> str:
    return "transparent" if module.transparent else module.color


class MarkupExporter(CodeExportPort):
    """Render a layout state into a standalone HTML page and its stylesheet."""

    def __init__(self, lang: str = "en", stylesheet_href: str = "style.css") -> None:
        self.lang = lang
        self.stylesheet_href = stylesheet_href

    # ---- HTML ----
    def render_html(self, state: LayoutState) -> str:
        items: List[str] = []
        for position, module in enumerate(state.ordered_modules(Viewport.DESKTOP), start=1):
            if module.kind is ModuleType.TEXT:
                body = _TEXT_PLACEHOLDER
            elif module.kind is ModuleType.IMAGE:
                body = _IMAGE_PLACEHOLDER
            else:
                body = "       "
            items.append(
                f'     <div class="{module_classes(module, position)}">\n'
                f"{body}\n"
                f"     </div>"
            )
        modules_html = "\n".join(items)
        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{self.lang}">\n'
            "<head>\n"
            '  <meta charset="UTF-8">\n'
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f'  <link rel="stylesheet" href="{self.stylesheet_href}">\n'
            "</head>\n"
            "<body>\n"
            '  <div class="grid-container">\n'
            f"{modules_html}\n"
            "  </div>\n"
            "</body>\n"
            "</html>"
        )

    # ---- CSS ----
    def render_css(self, state: LayoutState) -> str:
        config = state.config
        desktop_modules = state.ordered_modules(Viewport.DESKTOP)
        positions: Dict[int, int] = {
            module.id: position for position, module in enumerate(desktop_modules, start=1)
        }

        parts = [
            "body {\n"
            "  margin: 0;\n"
            "  background: whitesmoke;\n"
            f"  padding: {config.desktop_gap}px;\n"
            "}",
            ".grid-container {\n"
            "  display: grid;\n"
            f"  grid-template-columns: repeat({config.desktop_columns}, 1fr);\n"
            f"  gap: {config.desktop_gap}px;\n"
            "}",
            _BASE_RULES,
        ]
        for module in desktop_modules:
            parts.append(self._desktop_rule(module, positions[module.id], config.desktop_columns))

        media = [
            f"/* Mobile layout - {config.responsive_mode.label} */",
            f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
            f"  body {{ padding: {config.mobile_gap}px; }}",
            "  .grid-container {",
            f"    grid-template-columns: repeat({config.target_columns}, 1fr);",
            f"    gap: {config.mobile_gap}px;",
            "  }",
        ]
        if config.responsive_mode is ResponsiveMode.REFLOW:
            rules = [
                self._mobile_rule(state, module, positions[module.id], order)
                for order, module in enumerate(
                    m for m in state.ordered_modules(Viewport.MOBILE) if m.id in positions
                )
            ]
            if rules:
                media.append("")
                media.append("\n\n".join(rules))
        media.append("}")
        parts.append("\n".join(media))
        return "\n\n".join(parts)

    @staticmethod
    def _desktop_rule(module: Module, position: int, desktop_columns: int) -> str:
        lines = [
            f".module-{position} {{",
            f"  grid-column: span {desktop_span(module, desktop_columns)};",
            f"  grid-row: span {module.row};",
        ]
        if module.kind is ModuleType.BOX:
            lines.append(f"  background: {background(module)};")
        if module.border_width > 0:
            lines.append(f"  outline: {module.border_width}px solid {module.border_color};")
            lines.append(f"  outline-offset: -{module.border_width}px;")
        lines.append("}")
        return "\n".join(lines)

    @staticmethod
    def _mobile_rule(state: LayoutState, module: Module, position: int, order: int) -> str:
        config = state.config
        span = mobile_span(module, config.desktop_columns, config.target_columns)
        if module.has_mobile_override:
            comment = " /* manual */"
        else:
            comment = (
                f" /* auto: {module.col}/{config.desktop_columns}"
                f" × {config.target_columns} = {span} */"
            )
        return (
            f"  .module-{position} {{\n"
            f"    grid-column: span {span};{comment}\n"
            f"    grid-row: span {module.row};\n"
            f"    order: {order};\n"
            "  }"
        )


__all__ = ["MOBILE_BREAKPOINT_PX", "MarkupExporter", "background", "module_classes"]
