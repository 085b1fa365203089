from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_gh_commands.adapters.environment import MemoryEnvironment
from lib_gh_commands.application.use_cases.issue_command import CommandIssuer
from lib_gh_commands.runtime.session import ActionsSession


class RecordingSink:
    """Line sink keeping every written line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def string_console() -> Console:
    return Console(file=StringIO(), width=80)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def issuer(sink: RecordingSink) -> CommandIssuer:
    return CommandIssuer(sink)


@pytest.fixture
def environment() -> MemoryEnvironment:
    return MemoryEnvironment()


@pytest.fixture
def session(issuer: CommandIssuer, environment: MemoryEnvironment) -> ActionsSession:
    return ActionsSession(issuer, environment)
