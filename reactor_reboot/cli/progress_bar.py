from __future__ import annotations

from typing import TYPE_CHECKING

from rich import progress

from .console import rich_console

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..core.reactor import Command


class ProgressBar:
    """Tracks reboot steps as the reactor applies them."""

    def __init__(self, *, total: int, description: str, transient=True):
        self._progress = progress.Progress(
            progress.TextColumn("[progress.description]{task.description}"),
            progress.BarColumn(),
            progress.MofNCompleteColumn(),
            progress.TimeElapsedColumn(),
            console=rich_console,
            transient=transient,
        )
        self._task = self._progress.add_task(description, total=total)

    def __enter__(self) -> Callable[[Command], None]:
        self._progress.start()
        return self._advance

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._progress.stop()

    def _advance(self, command: Command):
        self._progress.advance(self._task)
