from __future__ import annotations

import io

import pytest
from rich.console import Console

from hotdog_pos.pos_app import PosApp


class Session:
    def __init__(self, app: PosApp, output: io.StringIO) -> None:
        self.app = app
        self._output = output

    @property
    def output(self) -> str:
        return self._output.getvalue()


@pytest.fixture
def make_session():
    def _make(keystrokes: str, menu=None) -> Session:
        output = io.StringIO()
        console = Console(file=output, width=120, highlight=False, color_system=None)
        app = PosApp(menu=menu, console=console, stdin=io.StringIO(keystrokes))
        return Session(app, output)

    return _make


@pytest.fixture
def capture_console():
    output = io.StringIO()
    return Console(file=output, width=120, highlight=False, color_system=None), output
