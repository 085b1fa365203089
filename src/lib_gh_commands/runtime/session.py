"""Session façade exposing the high-level workflow operations.

Purpose
-------
Offer the documented action toolkit operations (export variables, outputs,
secrets, annotations, groups, state, command suppression, failure) on an
explicit :class:`ActionsSession` instead of process-wide globals. Each write
operation builds a :class:`WorkflowCommand` and issues it; the read operations
consult the injected environment store.

Contents
--------
* :class:`ActionsSession` - the façade.
* :func:`input_variable_name` / :func:`state_variable_name` - naming rules for
  the environment variables the runner populates.

System Role
-----------
Outer layer used by host actions and by :mod:`lib_gh_commands.cli`.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from uuid import uuid4

from lib_gh_commands.application.ports.environment import EnvironmentPort
from lib_gh_commands.application.use_cases.issue_command import CommandIssuer, DeferredCommandIssue
from lib_gh_commands.domain.command import WorkflowCommand, to_command_value
from lib_gh_commands.domain.errors import InputRequiredError, InvalidArgumentError, require_text

logger = logging.getLogger(__name__)

RUNNER_DEBUG = "RUNNER_DEBUG"
INPUT_PREFIX = "INPUT_"
STATE_PREFIX = "STATE_"


def input_variable_name(name: str) -> str:
    """Return the environment variable holding action input ``name``.

    Examples
    --------
    >>> input_variable_name("build configuration")
    'INPUT_BUILD_CONFIGURATION'
    """

    return INPUT_PREFIX + name.replace(" ", "_").upper()


def state_variable_name(name: str) -> str:
    return STATE_PREFIX + name


def _describe_exception(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


class ActionsSession:
    """Workflow operations bound to one output stream and environment.

    Parameters
    ----------
    issuer:
        Serialising writer the commands are issued through.
    environment:
        Store read by :meth:`get_input`, :meth:`get_state` and
        :meth:`is_debug`, and updated by :meth:`export_variable` and
        :meth:`add_path`.

    Attributes
    ----------
    exit_code:
        Process exit status requested by the action; ``1`` after
        :meth:`set_failed`.
    """

    def __init__(self, issuer: CommandIssuer, environment: EnvironmentPort) -> None:
        self.issuer = issuer
        self.environment = environment
        self.exit_code = 0

    # Variables -----------------------------------------------------------

    def export_variable(self, name: str, value: Any) -> None:
        """Set ``name`` for this step and for the following steps of the job.

        Non-string values are serialised to JSON.
        """

        require_text("name", name)
        converted = to_command_value(value)
        self.environment.set(name, converted)
        self.issue_command(WorkflowCommand.set_environment_variable(name, converted))

    def set_secret(self, secret: str) -> None:
        """Register ``secret`` so the runner masks it in the log."""
        self.issue_command(WorkflowCommand.mask_value_in_log(secret))

    def add_path(self, path: str) -> None:
        """Prepend ``path`` to ``PATH`` for this and the following steps."""

        require_text("path", path)
        current = self.environment.get("PATH")
        self.environment.set("PATH", path + os.pathsep + current if current else path)
        self.issue_command(WorkflowCommand.add_system_path(path))

    def get_input(self, name: str, required: bool = False) -> str:
        """Return the trimmed value of input ``name``.

        Raises
        ------
        InputRequiredError
            When ``required`` is true and the input is unset or empty.
        """

        require_text("name", name)
        value = self.environment.get(input_variable_name(name)) or ""
        if required and not value:
            raise InputRequiredError(name)
        return value.strip()

    def set_output(self, name: str, value: Any) -> None:
        self.issue_command(WorkflowCommand.set_output_parameter(name, to_command_value(value)))

    def set_command_echo(self, enabled: bool) -> None:
        """Turn echoing of workflow commands in the log on or off."""
        self.issue_command(WorkflowCommand.echo(enabled))

    # Results -------------------------------------------------------------

    def set_failed(self, message: str | BaseException) -> None:
        """Mark the action as failed and report ``message`` as an error."""

        self.exit_code = 1
        logger.debug("action marked as failed (exit code %d)", self.exit_code)
        self.error(message)

    # Logging -------------------------------------------------------------

    def is_debug(self) -> bool:
        """Return ``True`` when step debug logging is enabled on the runner."""
        return self.environment.get(RUNNER_DEBUG) == "1"

    def debug(self, message: str) -> None:
        self.issue_command(WorkflowCommand.debug_message(message))

    def error(
        self,
        message: str | BaseException,
        *,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        if isinstance(message, BaseException):
            message = _describe_exception(message)
        self.issue_command(WorkflowCommand.error_message(message, file, line, col))

    def warning(
        self,
        message: str | BaseException,
        *,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        if isinstance(message, BaseException):
            message = _describe_exception(message)
        self.issue_command(WorkflowCommand.warning_message(message, file, line, col))

    def info(self, message: str) -> None:
        """Write ``message`` to the log as a plain line."""
        self.issuer.write_line(message)

    def start_group(self, name: str) -> None:
        """Begin a foldable output group."""
        self.issue_command(WorkflowCommand.start_group(name))

    def end_group(self) -> None:
        self.issue_command(WorkflowCommand.end_group())

    def group(self, name: str) -> DeferredCommandIssue:
        """Start group ``name`` and return a handle that ends it.

        Examples
        --------
        >>> from lib_gh_commands.adapters.environment import MemoryEnvironment
        >>> class ListSink:
        ...     def __init__(self):
        ...         self.lines = []
        ...     def write_line(self, line):
        ...         self.lines.append(line)
        >>> sink = ListSink()
        >>> session = ActionsSession(CommandIssuer(sink), MemoryEnvironment())
        >>> with session.group("Build"):
        ...     session.info("compiling")
        >>> sink.lines
        ['::group::Build', 'compiling', '::endgroup::Build']
        """

        self.start_group(name)
        return self.issuer.defer(WorkflowCommand.end_group(name))

    # Wrapper action state ------------------------------------------------

    def save_state(self, name: str, value: Any) -> None:
        """Save state for the post-job step of this action."""
        self.issue_command(WorkflowCommand.save_state(name, to_command_value(value)))

    def get_state(self, name: str) -> str | None:
        """Return state saved by the main step, verbatim."""
        return self.environment.get(state_variable_name(name))

    # Stopping workflow commands -----------------------------------------

    def stop_commands(self, token: str | None = None) -> WorkflowCommand:
        """Stop processing workflow commands and return the resume command.

        A random token is generated when ``token`` is ``None``; an empty
        token is rejected.
        """

        if token is None:
            token = uuid4().hex
        elif token == "":
            raise InvalidArgumentError("token")
        self.issue_command(WorkflowCommand.stop_processing(token))
        return WorkflowCommand.resume(token)

    def suppress_command_processing(self, token: str | None = None) -> DeferredCommandIssue:
        """Stop processing commands until the returned handle is released."""
        return self.issuer.defer(self.stop_commands(token))

    def issue_command(self, command: WorkflowCommand | None) -> None:
        self.issuer.issue(command)


__all__ = [
    "ActionsSession",
    "INPUT_PREFIX",
    "RUNNER_DEBUG",
    "STATE_PREFIX",
    "input_variable_name",
    "state_variable_name",
]
