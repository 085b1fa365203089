"""Value objects describing events raised by a build engine."""

from __future__ import annotations

from dataclasses import dataclass

from .verbosity import MessageImportance


@dataclass(slots=True, frozen=True)
class BuildDiagnosticEvent:
    """Common shape of build warnings and errors.

    Attributes
    ----------
    message:
        Diagnostic text as reported by the tool.
    code:
        Tool specific diagnostic code such as ``CS0168``.
    file:
        Source file the diagnostic refers to; may be relative to the build's
        working directory.
    line_number, column_number:
        One-based position; ``0`` or negative values mean "unknown".
    """

    message: str
    code: str | None = None
    subcategory: str | None = None
    file: str | None = None
    line_number: int = 0
    column_number: int = 0
    project_file: str | None = None
    sender: str | None = None


@dataclass(slots=True, frozen=True)
class BuildWarningEvent(BuildDiagnosticEvent):
    """A warning raised during the build."""


@dataclass(slots=True, frozen=True)
class BuildErrorEvent(BuildDiagnosticEvent):
    """An error raised during the build."""


@dataclass(slots=True, frozen=True)
class BuildMessageEvent:
    """An informational build message gated by verbosity."""

    message: str
    importance: MessageImportance = MessageImportance.NORMAL
    code: str | None = None
    file: str | None = None
    line_number: int = 0
    column_number: int = 0
    sender: str | None = None


__all__ = [
    "BuildDiagnosticEvent",
    "BuildErrorEvent",
    "BuildMessageEvent",
    "BuildWarningEvent",
]
