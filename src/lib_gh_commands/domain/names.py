"""Well-known workflow command names understood by the runner."""

from __future__ import annotations

ADD_PATH = "add-path"
DEBUG = "debug"
ECHO = "echo"
END_GROUP = "endgroup"
ERROR = "error"
EXPORT_VARIABLE = "set-env"
SAVE_STATE = "save-state"
SET_OUTPUT = "set-output"
SET_SECRET = "add-mask"
START_GROUP = "group"
STOP_PROCESSING = "stop-commands"
WARNING = "warning"

MISSING_COMMAND = "missing.command"
#: Substituted when a command is constructed without a name.

COMMAND_MARKER = "::"


__all__ = [
    "ADD_PATH",
    "COMMAND_MARKER",
    "DEBUG",
    "ECHO",
    "END_GROUP",
    "ERROR",
    "EXPORT_VARIABLE",
    "MISSING_COMMAND",
    "SAVE_STATE",
    "SET_OUTPUT",
    "SET_SECRET",
    "START_GROUP",
    "STOP_PROCESSING",
    "WARNING",
]
