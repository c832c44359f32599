# # CLI entrypoint: list registered widgets, or render one widget to stdout.

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import load_config
from .console import ConsoleOptions, make_console, widgets_table
from .errors import WidgetError
from .hosting import WidgetTemplates, offline_request
from .logging_setup import setup_logging
from .widgets.registry import available_widgets, get_widget

logger = logging.getLogger(__name__)


def parse_arguments(pairs: List[str]) -> Dict[str, Any]:
    # # key=value; values are JSON when they parse as JSON, plain strings otherwise
    out: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {pair!r}")
        try:
            out[key] = json.loads(raw)
        except json.JSONDecodeError:
            out[key] = raw
    return out


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("page-widgets")

    # # Common
    p.add_argument("--config", default="widgets.json")
    p.add_argument("--module", action="append", default=[], help="Module to import so its widgets register (repeatable)")
    p.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None)
    p.add_argument("--console-width", type=int, default=None)
    p.add_argument("--no-color", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show registered widgets")

    r = sub.add_parser("render", help="Render one widget and write its HTML to stdout")
    r.add_argument("name")
    r.add_argument("--templates", default=None, help="Template directory (overrides config)")
    r.add_argument("--arg", action="append", default=[], metavar="KEY=VALUE")
    r.add_argument("--path", default="/", help="Request path seen by the widget")

    return p


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = load_config(Path(args.config))

    # # Overrides
    if args.log_level is not None:
        cfg.log_level = args.log_level
    if args.log_file is not None:
        cfg.log_file = args.log_file

    setup_logging(
        level=cfg.log_level,
        log_file=cfg.log_file,
        quiet_loggers=cfg.quiet_loggers,
        console_width=args.console_width,
        no_color=args.no_color,
    )

    for module in args.module:
        logger.debug("Importing %s", module)
        importlib.import_module(module)

    console = make_console(ConsoleOptions(width=args.console_width, no_color=args.no_color))

    if args.command == "list":
        console.print(widgets_table(get_widget(n) for n in available_widgets()))
        return 0

    templates = WidgetTemplates(args.templates, config=cfg)
    try:
        html = templates.render_widget(offline_request(args.path), args.name, parse_arguments(args.arg))
    except (WidgetError, ValueError) as e:
        logger.error("%s", e)
        return 1

    sys.stdout.write(html)
    if not html.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
