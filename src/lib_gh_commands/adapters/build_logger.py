"""Build logger translating build engine events into workflow commands.

Purpose
-------
Subscribe to the warning, error and informational events of a build engine and
report them to the Actions runner: diagnostics become ``::warning`` and
``::error`` annotations anchored to a path relative to the solution root,
informational messages become plain log lines when the configured verbosity
lets them through.

Contents
--------
* :class:`GitHubBuildLogger` - the adapter.
* :func:`relative_to_root` - path relativization helper.

System Role
-----------
Outermost adapter between a :class:`BuildEventSourcePort` and a
:class:`CommandIssuer`. Parameters use the ``key=value|key=value`` syntax
parsed by :class:`LoggerParameters`; recognised keys are ``Verbosity``,
``SolutionDir`` and ``ErrorsAsWarnings``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath

from lib_gh_commands.application.ports.build_events import BuildEventSourcePort
from lib_gh_commands.application.use_cases.issue_command import CommandIssuer
from lib_gh_commands.domain.build_events import (
    BuildDiagnosticEvent,
    BuildErrorEvent,
    BuildMessageEvent,
    BuildWarningEvent,
)
from lib_gh_commands.domain.command import WorkflowCommand
from lib_gh_commands.domain.errors import InvalidArgumentError
from lib_gh_commands.domain.parameters import LoggerParameters
from lib_gh_commands.domain.verbosity import LoggerVerbosity, is_message_visible

from ._formatting import format_build_event

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def relative_to_root(path: str | None, root: str | None, *, cwd: str | None = None) -> str | None:
    """Return ``path`` relative to ``root`` using forward slashes.

    Relative inputs are made absolute against ``cwd`` (default: the current
    directory) first. Without a ``root`` the absolute path is returned as is.
    Paths that cannot be expressed relative to ``root`` (another drive) are
    returned absolute.

    Examples
    --------
    >>> relative_to_root("/repo/src/a.cs", "/repo/")
    'src/a.cs'
    >>> relative_to_root("/other/a.cs", "/repo")
    '../other/a.cs'
    >>> relative_to_root("/repo/src/a.cs", None)
    '/repo/src/a.cs'
    >>> relative_to_root("", "/repo") is None
    True
    """

    if not path:
        return None
    if not os.path.isabs(path):
        path = os.path.abspath(os.path.join(cwd or os.getcwd(), path))
    if root is None:
        return path
    try:
        relative = os.path.relpath(path, root)
    except ValueError:
        logger.debug("cannot relativize %s against %s", path, root)
        return path
    return PurePosixPath(*Path(relative).parts).as_posix()


def _line_column(line_number: int, column_number: int) -> tuple[int | None, int | None]:
    line = line_number if line_number > 0 else None
    column = column_number if column_number >= 0 else None
    return line, column


class GitHubBuildLogger:
    """Report build events as workflow commands.

    Parameters
    ----------
    issuer:
        Destination of the rendered commands.
    parameters:
        Logger parameter string, e.g. ``"Verbosity=Detailed|SolutionDir=/repo"``.
    verbosity:
        Initial verbosity; a ``Verbosity`` parameter overrides it.
    cwd:
        Directory used to absolutize relative file paths and solution roots.

    Examples
    --------
    >>> from lib_gh_commands.adapters.build_events import BuildEventHub
    >>> class ListSink:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def write_line(self, line):
    ...         self.lines.append(line)
    >>> sink = ListSink()
    >>> hub = BuildEventHub()
    >>> GitHubBuildLogger(CommandIssuer(sink), parameters="SolutionDir=/repo").initialize(hub)
    >>> hub.raise_error(BuildErrorEvent("boom", code="E1", file="/repo/a.cs", line_number=2))
    >>> sink.lines
    ['::error file=a.cs,line=2,col=0::E1: boom']
    """

    def __init__(
        self,
        issuer: CommandIssuer,
        *,
        parameters: str | None = None,
        verbosity: LoggerVerbosity = LoggerVerbosity.NORMAL,
        cwd: str | None = None,
    ) -> None:
        self._issuer = issuer
        self.parameters = parameters
        self._verbosity = verbosity
        self._cwd = cwd
        self._solution_dir: str | None = None
        self._errors_as_warnings = False
        self._initialized = False

    @property
    def verbosity(self) -> LoggerVerbosity:
        return self._verbosity

    @property
    def solution_dir(self) -> str | None:
        """Absolute solution root ending in a separator, or ``None``."""
        return self._solution_dir

    @property
    def errors_as_warnings(self) -> bool:
        return self._errors_as_warnings

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self, event_source: BuildEventSourcePort | None) -> None:
        """Apply the parameters and subscribe to ``event_source``.

        Raises
        ------
        InvalidArgumentError
            When ``event_source`` is ``None``.
        DuplicateParameterError
            When the parameter string repeats a key.
        RuntimeError
            When the logger was already initialised.
        """

        if event_source is None:
            raise InvalidArgumentError("event_source")
        if self._initialized:
            raise RuntimeError("build logger is already initialised")

        params = LoggerParameters.parse(self.parameters)
        self._apply_verbosity(params["Verbosity"])
        self._solution_dir = self._resolve_solution_dir(params["SolutionDir"])
        self._errors_as_warnings = params["ErrorsAsWarnings"].lower() in _TRUTHY

        event_source.on_warning(self.on_warning)
        event_source.on_error(self.on_error)
        event_source.on_info(self.on_info)
        self._initialized = True
        logger.debug(
            "build logger initialised (verbosity=%s, solution_dir=%s)",
            self._verbosity.name,
            self._solution_dir,
        )

    def _apply_verbosity(self, value: str) -> None:
        if not value:
            return
        try:
            self._verbosity = LoggerVerbosity.from_name(value)
        except ValueError:
            logger.debug("ignoring unparsable verbosity %r", value)

    def _resolve_solution_dir(self, value: str) -> str | None:
        if not value:
            return None
        base = self._cwd or os.getcwd()
        return os.path.join(os.path.abspath(os.path.join(base, value)), "")

    def _position(self, event: BuildDiagnosticEvent) -> tuple[str | None, int | None, int | None]:
        file = relative_to_root(event.file, self._solution_dir, cwd=self._cwd)
        line, column = _line_column(event.line_number, event.column_number)
        return file, line, column

    def on_warning(self, event: BuildWarningEvent) -> None:
        file, line, column = self._position(event)
        command = WorkflowCommand.warning_message(format_build_event(event), file, line, column)
        self._issuer.issue(command)

    def on_error(self, event: BuildErrorEvent) -> None:
        file, line, column = self._position(event)
        factory = WorkflowCommand.warning_message if self._errors_as_warnings else WorkflowCommand.error_message
        self._issuer.issue(factory(format_build_event(event), file, line, column))

    def on_info(self, event: BuildMessageEvent) -> None:
        if not is_message_visible(event.importance, self._verbosity):
            return
        self._issuer.write_line(event.message)


__all__ = ["GitHubBuildLogger", "relative_to_root"]
