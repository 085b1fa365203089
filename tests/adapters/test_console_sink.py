from __future__ import annotations

import pytest
from rich.console import Console

from lib_gh_commands.adapters.console.rich_console import RichConsoleSink
from lib_gh_commands.adapters.environment import MemoryEnvironment
from lib_gh_commands.runtime import create_session

CONTROL_CHARACTER_LINES = [
    "::warning::col1\tcol2",
    "a\tb",
    "::debug::bell\x07x\x0cy",
    "::add-mask::p\tw\x0b\x08",
]


def _written(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def test_rich_console_sink_writes_line_verbatim(string_console: Console) -> None:
    sink = RichConsoleSink(console=string_console)
    sink.write_line("::warning file=a.cs,line=1::[red]not markup[/red] :smile:")
    assert _written(string_console) == "::warning file=a.cs,line=1::[red]not markup[/red] :smile:\n"


def test_rich_console_sink_does_not_wrap_long_lines(string_console: Console) -> None:
    sink = RichConsoleSink(console=string_console)
    long_line = "::debug::" + "x" * 300
    sink.write_line(long_line)
    assert _written(string_console) == long_line + "\n"


def test_rich_console_sink_writes_lines_in_order(string_console: Console) -> None:
    sink = RichConsoleSink(console=string_console)
    sink.write_line("first")
    sink.write_line("second")
    assert _written(string_console) == "first\nsecond\n"


@pytest.mark.parametrize("line", CONTROL_CHARACTER_LINES)
def test_rich_console_sink_keeps_tabs_and_control_characters(string_console: Console, line: str) -> None:
    RichConsoleSink(console=string_console).write_line(line)
    assert _written(string_console) == line + "\n"


def test_default_console_targets_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    sink = RichConsoleSink()
    sink.write_line("::add-mask::secret")
    assert capsys.readouterr().out == "::add-mask::secret\n"


def test_default_session_sink_is_byte_exact(capsys: pytest.CaptureFixture[str]) -> None:
    session = create_session(environment=MemoryEnvironment())
    session.warning("col1\tcol2")
    session.info("a\tb")
    session.debug("bell\x07x\x0cy")
    session.set_secret("p\tw")

    assert capsys.readouterr().out == "::warning::col1\tcol2\na\tb\n::debug::bell\x07x\x0cy\n::add-mask::p\tw\n"
