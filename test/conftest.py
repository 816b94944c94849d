from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def mock_console(monkeypatch):
    from reactor_reboot.cli.console import Console

    for attr in dir(Console):
        if not attr.startswith("_") and callable(getattr(Console, attr)):
            monkeypatch.setattr(Console, attr, lambda *a, **k: None)


@pytest.fixture(autouse=True)
def mock_progress_bar(monkeypatch):
    from reactor_reboot.cli.progress_bar import ProgressBar

    monkeypatch.setattr(ProgressBar, "__enter__", lambda self: lambda command: None)
    monkeypatch.setattr(ProgressBar, "__exit__", lambda *args: None)
