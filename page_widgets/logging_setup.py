# # Logging: rich console handler on stderr (stdout carries rendered HTML), optional log file.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from rich.logging import RichHandler

from .console import ConsoleOptions, make_console

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _file_handler(log_file: str, level: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return fh


def setup_logging(
    *,
    level: str = "INFO",
    log_file: str | None = None,
    quiet_loggers: Sequence[str] = (),
    console_width: int | None = None,
    no_color: bool = False,
) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    console = make_console(ConsoleOptions(width=console_width, no_color=no_color, stderr=True))
    handlers: list[logging.Handler] = [
        RichHandler(console=console, rich_tracebacks=True, markup=False, show_path=False)
    ]
    if log_file:
        handlers.append(_file_handler(log_file, numeric_level))

    # # Configured third-party loggers only speak up at WARNING, unless we are debugging
    quiet_level = logging.WARNING if numeric_level > logging.DEBUG else numeric_level
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(quiet_level)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)
