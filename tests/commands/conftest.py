"""Fixtures shared by CLI command tests."""

from typing import Generator

import pytest


@pytest.fixture(autouse=True)
def plain_console(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Uncolored console output, recreated for every test."""
    import gcspublish.console

    monkeypatch.setenv("NO_COLOR", "1")
    gcspublish.console._console = None
    yield
    gcspublish.console._console = None
