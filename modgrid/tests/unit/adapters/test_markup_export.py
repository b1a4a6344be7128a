from __future__ import annotations

from modgrid.adapters.markup_export import MarkupExporter, background, module_classes
from modgrid.domain.entities import Module, ModuleType, Viewport
from modgrid.tests.unit.helpers import make_controller


def _sample_controller():
    controller = make_controller(desktop_columns=6, target_columns=2)
    a = controller.create_module(col=3, row=2)
    b = controller.create_module(col=6, row=1, kind="text", group_id="hero", mobile_col=2)
    c = controller.create_module(col=2, row=1, kind="image", border_width=3, border_color="#ff0000")
    return controller, a, b, c


def test_module_classes_include_type_and_group() -> None:
    module = Module(id=7, col=1, row=1, kind=ModuleType.TEXT, group_id="g1")
    assert module_classes(module, 4) == "module module-4 type-text group-g1"
    assert module_classes(Module(id=8, col=1, row=1), 1) == "module module-1 type-box"


def test_background_respects_transparency() -> None:
    assert background(Module(id=1, col=1, row=1, color="#123456")) == "#123456"
    assert background(Module(id=1, col=1, row=1, transparent=True)) == "transparent"


def test_html_lists_modules_in_desktop_order() -> None:
    controller, _, _, _ = _sample_controller()
    html = MarkupExporter().render_html(controller.state)

    assert html.startswith("<!DOCTYPE html>")
    assert '<link rel="stylesheet" href="style.css">' in html
    first = html.index('class="module module-1 type-box"')
    second = html.index('class="module module-2 type-text group-hero"')
    third = html.index('class="module module-3 type-image"')
    assert first < second < third
    assert "<p>Lorem ipsum...</p>" in html
    assert '<img src="https://via.placeholder.com/150" alt="placeholder">' in html


def test_css_desktop_rules() -> None:
    controller, _, _, _ = _sample_controller()
    css = MarkupExporter().render_css(controller.state)

    assert "grid-template-columns: repeat(6, 1fr);" in css
    assert ".module-1 {\n  grid-column: span 3;\n  grid-row: span 2;\n  background: #8c6c3c;\n}" in css
    # Text modules never carry a background rule.
    assert ".module-2 {\n  grid-column: span 6;\n  grid-row: span 1;\n}" in css
    assert "outline: 3px solid #ff0000;" in css
    assert "outline-offset: -3px;" in css


def test_css_mobile_block_follows_mobile_order() -> None:
    controller, a, b, _ = _sample_controller()
    controller.reorder(Viewport.MOBILE, b, 0)
    css = MarkupExporter().render_css(controller.state)

    assert "/* Mobile layout - Reflow */" in css
    media = css[css.index("@media (max-width: 768px) {"):]
    assert "grid-template-columns: repeat(2, 1fr);" in media
    assert (
        "  .module-2 {\n"
        "    grid-column: span 2; /* manual */\n"
        "    grid-row: span 1;\n"
        "    order: 0;\n"
        "  }"
    ) in media
    assert "grid-column: span 1; /* auto: 3/6 × 2 = 1 */" in media
    assert media.index(".module-2 {") < media.index(".module-1 {")
    assert media.rstrip().endswith("}")


def test_empty_layout_renders_skeleton() -> None:
    controller = make_controller()
    exporter = MarkupExporter()
    html = exporter.render_html(controller.state)
    css = exporter.render_css(controller.state)

    assert "module-1" not in html
    assert '<div class="grid-container">' in html
    assert "order:" not in css
    assert "@media (max-width: 768px)" in css
