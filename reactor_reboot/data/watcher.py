from __future__ import annotations

import os
import time
from pathlib import Path
from threading import Thread
from typing import Generator

import watchfiles
from click import UsageError

from ..cli.console import Console
from ..core.reactor import Command
from .loader import load


def watch(path: Path | None) -> Generator[list[Command]]:
    if not path:
        raise UsageError("--watch requires an input file.")

    def trigger_initial_run():
        # Need a way to trigger the first run.
        # Only alternative to yield once before the watch loop;
        # but then changes during the initial run would be missed.
        while not triggered:
            time.sleep(0.2)
            os.utime(path)

    triggered = False
    trigger_thread = Thread(target=trigger_initial_run, daemon=True)
    trigger_thread.start()

    is_first_run = True
    for _ in watchfiles.watch(path, debounce=0, rust_timeout=0):
        triggered = True
        try:
            yield load(path)
            is_first_run = False
        except UsageError:
            # Ignore read errors on subsequent runs
            # because file may temporarily be in an invalid state
            if is_first_run:
                raise
            Console.warn("Input is not valid yet; waiting for further changes.")
