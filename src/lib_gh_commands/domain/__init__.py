"""Domain entities and value objects of the workflow-command protocol."""

from __future__ import annotations

from . import names
from .build_events import BuildDiagnosticEvent, BuildErrorEvent, BuildMessageEvent, BuildWarningEvent
from .command import WorkflowCommand, to_command_value
from .errors import CommandError, DuplicateParameterError, InputRequiredError, InvalidArgumentError
from .escaping import escape_data, escape_property
from .parameters import LoggerParameters
from .verbosity import LoggerVerbosity, MessageImportance, is_message_visible

__all__ = [
    "BuildDiagnosticEvent",
    "BuildErrorEvent",
    "BuildMessageEvent",
    "BuildWarningEvent",
    "CommandError",
    "DuplicateParameterError",
    "InputRequiredError",
    "InvalidArgumentError",
    "LoggerParameters",
    "LoggerVerbosity",
    "MessageImportance",
    "WorkflowCommand",
    "escape_data",
    "escape_property",
    "is_message_visible",
    "names",
    "to_command_value",
]
