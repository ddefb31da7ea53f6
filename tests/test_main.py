import io
import signal

import pytest
from blessed import Terminal

from chess_tui import main as main_module
from chess_tui.screen import Screen
from chess_tui.utils import check_terminal_support


class FakeTerm:
    def __init__(self, width=80, height=24, colors=256):
        self.width = width
        self.height = height
        self.number_of_colors = colors
        self.kind = "xterm-256color"


@pytest.fixture(autouse=True)
def _keep_sigint(monkeypatch):
    monkeypatch.setattr(main_module.signal, "signal", lambda *args: None)


class TestMain:
    def test_no_terminal_exits_with_error(self, capsys):
        term = Terminal(kind='xterm-256color', stream=io.StringIO(), force_styling=True)
        assert main_module.main([], screen=Screen(term)) == 1
        assert "must be run in a terminal" in capsys.readouterr().err

    def test_bad_arguments(self):
        with pytest.raises(SystemExit):
            main_module.main(["--clock", "soon"])

    def test_signal_handler_exits_cleanly(self):
        with pytest.raises(SystemExit) as excinfo:
            main_module.signal_handler(signal.SIGINT, None)
        assert excinfo.value.code == 0


class TestTerminalSupport:
    def test_no_warnings(self):
        assert check_terminal_support(FakeTerm()) == []

    def test_small_terminal(self):
        warnings = check_terminal_support(FakeTerm(width=40, height=10))
        assert len(warnings) == 1
        assert "40x10" in warnings[0]

    def test_few_colors(self):
        warnings = check_terminal_support(FakeTerm(colors=8))
        assert "8 colors" in warnings[0]
