"""Terminal output helpers for CLI commands.

Results go to stdout; diagnostics go to stderr.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

stdout = Console(highlight=False)
stderr = Console(stderr=True, highlight=False)


def line(text: str) -> None:
    """Print ``text`` verbatim; file names may contain markup characters."""
    stdout.print(text, markup=False, emoji=False, soft_wrap=True)


def table(title: str, columns: list[str], rows: list[list[Any]]) -> None:
    tbl = Table(title=title)
    styles = ["cyan", None, "green"]
    for i, name in enumerate(columns):
        style = styles[i] if i < len(styles) else None
        tbl.add_column(name, style=style, overflow="fold")
    for row in rows:
        tbl.add_row(*(escape(str(v)) for v in row))
    stdout.print(tbl)


def error(text: str) -> None:
    stderr.print(f"[red]error:[/] {escape(text)}", soft_wrap=True)
