# # Rich console for CLI output: widget listings and render summaries.

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme as RichTheme

from .widgets.registry import WidgetDescriptor


@dataclass(frozen=True)
class ConsoleOptions:
    # If None, use terminal size.
    width: int | None = None
    # If True, disable color.
    no_color: bool = False
    # Write to stderr so rendered HTML on stdout stays clean.
    stderr: bool = False


def _console_width(opts: ConsoleOptions) -> int:
    if opts.width is not None:
        return opts.width

    env_width = os.getenv("PAGE_WIDGETS_CONSOLE_WIDTH")
    if env_width:
        try:
            return int(env_width)
        except ValueError:
            pass

    return shutil.get_terminal_size(fallback=(120, 40)).columns


def make_console(opts: ConsoleOptions | None = None) -> Console:
    opts = opts or ConsoleOptions()

    theme = RichTheme(
        {
            "info": "cyan",
            "ok": "green",
            "warn": "yellow",
            "err": "red",
            "dim": "dim",
            "name": "bold magenta",
        }
    )

    return Console(
        width=_console_width(opts),
        theme=theme,
        color_system=None if opts.no_color else "auto",
        stderr=opts.stderr,
        soft_wrap=False,
        highlight=False,
    )


def widgets_table(descriptors: Iterable[WidgetDescriptor]) -> Table:
    table = Table(
        title="Registered widgets",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
        header_style="bold",
        expand=False,
    )
    table.add_column("Name", style="name", no_wrap=True)
    table.add_column("Type", overflow="ellipsis")
    table.add_column("Method", style="dim", no_wrap=True)

    rows = 0
    for d in descriptors:
        table.add_row(d.name, d.type_name, d.method_name)
        rows += 1
    if rows == 0:
        table.add_row("[dim]none[/dim]", "", "")
    return table
