"""Public package surface for issuing GitHub Actions workflow commands.

``lib_gh_commands`` renders workflow commands (``::name key=value::message``)
for the Actions runner, exposes the action toolkit operations on an explicit
:class:`ActionsSession`, and adapts build engine events through
:class:`GitHubBuildLogger`.
"""

from __future__ import annotations

from .adapters import BuildEventHub, GitHubBuildLogger, MemoryEnvironment, OsEnvironment, RichConsoleSink
from .application.use_cases import CommandIssuer, DeferredCommandIssue
from .domain import (
    BuildErrorEvent,
    BuildMessageEvent,
    BuildWarningEvent,
    CommandError,
    DuplicateParameterError,
    InputRequiredError,
    InvalidArgumentError,
    LoggerParameters,
    LoggerVerbosity,
    MessageImportance,
    WorkflowCommand,
    escape_data,
    escape_property,
)
from .runtime import ActionsSession, create_build_logger, create_session

__all__ = [
    "ActionsSession",
    "BuildErrorEvent",
    "BuildEventHub",
    "BuildMessageEvent",
    "BuildWarningEvent",
    "CommandError",
    "CommandIssuer",
    "DeferredCommandIssue",
    "DuplicateParameterError",
    "GitHubBuildLogger",
    "InputRequiredError",
    "InvalidArgumentError",
    "LoggerParameters",
    "LoggerVerbosity",
    "MemoryEnvironment",
    "MessageImportance",
    "OsEnvironment",
    "RichConsoleSink",
    "WorkflowCommand",
    "create_build_logger",
    "create_session",
    "escape_data",
    "escape_property",
]
