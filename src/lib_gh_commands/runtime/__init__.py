"""Runtime façade wiring the command pipeline.

Purpose
-------
Expose :func:`create_session`, the composition root that assembles a
:class:`ActionsSession` from a console sink, a serialising issuer and an
environment store, plus :func:`create_build_logger` for build engine hosts.

System Role
-----------
Host code depends on this module instead of importing adapters directly; the
defaults (stdout through Rich, ``os.environ``) match what the runner expects.
"""

from __future__ import annotations

from rich.console import Console

from lib_gh_commands.adapters import GitHubBuildLogger, OsEnvironment, RichConsoleSink
from lib_gh_commands.application.ports import EnvironmentPort, LineSinkPort
from lib_gh_commands.application.use_cases import CommandIssuer
from lib_gh_commands.domain.verbosity import LoggerVerbosity

from .session import ActionsSession, input_variable_name, state_variable_name


def create_session(
    *,
    environment: EnvironmentPort | None = None,
    sink: LineSinkPort | None = None,
    console: Console | None = None,
) -> ActionsSession:
    """Compose a session writing to ``sink`` (default: stdout via Rich)."""

    if sink is None:
        sink = RichConsoleSink(console=console)
    return ActionsSession(CommandIssuer(sink), environment or OsEnvironment())


def create_build_logger(
    session: ActionsSession,
    *,
    parameters: str | None = None,
    verbosity: LoggerVerbosity = LoggerVerbosity.NORMAL,
    cwd: str | None = None,
) -> GitHubBuildLogger:
    """Return a build logger sharing the output stream of ``session``."""

    return GitHubBuildLogger(session.issuer, parameters=parameters, verbosity=verbosity, cwd=cwd)


__all__ = [
    "ActionsSession",
    "create_build_logger",
    "create_session",
    "input_variable_name",
    "state_variable_name",
]
