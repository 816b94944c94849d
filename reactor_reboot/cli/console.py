from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console as _Console
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from ..data.schema import Report

rich_console = _Console(stderr=True)
_print = rich_console.print


def _emit(text: str, *, color: str, important: bool, **kwargs):
    if kwargs:
        text = text.format(**{
            k: f"[bold {color}]{v}[/bold {color}]" for k, v in kwargs.items()
        })
    if important:
        _print(Panel(text, expand=False, border_style=color))
    elif color == "blue":
        _print(text, style="dim")
    else:
        _print(text, style=f"dim {color}")


class Console:
    @staticmethod
    def newline():
        _print()

    @staticmethod
    def info(text: str, *, important=False, **kwargs):
        _emit(text, color="blue", important=important, **kwargs)

    @staticmethod
    def success(text: str, *, important=False, **kwargs):
        _emit(text, color="green", important=important, **kwargs)

    @staticmethod
    def warn(text: str, *, important=False, **kwargs):
        _emit(text, color="red", important=important, **kwargs)

    @staticmethod
    def report(report: Report):
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="dim")
        table.add_column(justify="right", style="bold green")
        table.add_row("Steps", f"{report.steps:,}")
        table.add_row("Disjoint cuboids", f"{report.cuboids:,}")
        table.add_row("Cubes on", f"{report.total:,}")
        if report.limit is not None and report.clipped is not None:
            table.add_row(f"Cubes on within {report.limit}", f"{report.clipped:,}")
        _print(Panel(table, title="Reactor", expand=False, border_style="green"))
