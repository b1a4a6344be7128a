"""Command-line entry point: build a layout from arguments and print its code."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Dict, List, Optional, Sequence

from ..domain.entities import LayoutConfig
from ..domain.errors import UseCaseError
from ..utils import logging as logging_utils
from .controller import LayoutController

logger = logging.getLogger(__name__)

# COLxROW[:TYPE][@GROUP][/MOBILE]
_MODULE_PATTERN = re.compile(
    r"^(?P<col>\d+)x(?P<row>\d+)"
    r"(?::(?P<kind>[A-Za-z]+))?"
    r"(?:@(?P<group>[^/]+))?"
    r"(?:/(?P<mobile>\d+))?$"
)


def parse_module_spec(token: str) -> Dict[str, object]:
    """Translate a ``--module`` token into a create payload."""
    match = _MODULE_PATTERN.match(token.strip())
    if not match:
        raise argparse.ArgumentTypeError(
            f"Invalid module '{token}' (expected COLxROW[:TYPE][@GROUP][/MOBILE])"
        )
    spec: Dict[str, object] = {"col": match["col"], "row": match["row"]}
    if match["kind"]:
        spec["kind"] = match["kind"]
    if match["group"]:
        spec["group_id"] = match["group"]
    if match["mobile"]:
        spec["mobile_col"] = match["mobile"]
    return spec


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="modgrid",
        description="Build a responsive grid layout and print its HTML/CSS.",
    )
    parser.add_argument("--columns", type=int, default=6, help="desktop columns (1-12)")
    parser.add_argument("--target-columns", type=int, default=2, help="mobile columns (1-12)")
    parser.add_argument("--gap", type=int, default=10, help="desktop gap in px (0-50)")
    parser.add_argument("--mobile-gap", type=int, default=10, help="mobile gap in px (0-50)")
    parser.add_argument(
        "--module",
        dest="modules",
        action="append",
        type=parse_module_spec,
        default=[],
        metavar="COLxROW[:TYPE][@GROUP][/MOBILE]",
        help="add a module; repeat for more",
    )
    parser.add_argument("--format", choices=("html", "css", "both"), default="both")
    parser.add_argument(
        "--log-level",
        default=None,
        help="log level; overrides MODGRID_LOG_LEVEL and MODGRID_DEBUG",
    )
    return parser.parse_args(argv)


def build_controller(args: argparse.Namespace) -> LayoutController:
    config = LayoutConfig(
        desktop_columns=args.columns,
        target_columns=args.target_columns,
        desktop_gap=args.gap,
        mobile_gap=args.mobile_gap,
    )
    controller = LayoutController(config)
    for spec in args.modules:
        controller.create_module(spec)
    logger.info("Built layout with %d module(s)", len(controller.modules()))
    return controller


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = _parse_args(argv)
    level = logging_utils.configure_root(logging.WARNING)
    if args.log_level:
        level = logging_utils.apply_explicit_level(args.log_level)
    logger.debug("Effective log level: %s", logging_utils.level_name(level))
    controller = build_controller(args)

    formats: List[str] = ["html", "css"] if args.format == "both" else [args.format]
    try:
        blocks = [controller.export_code(fmt) for fmt in formats]
    except UseCaseError as exc:
        logger.error("Export failed (%s): %s", exc.code, exc.message)
        return 1
    sys.stdout.write("\n\n".join(blocks) + "\n")
    return 0
