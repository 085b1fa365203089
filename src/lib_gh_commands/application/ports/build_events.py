"""Port describing a build engine that raises warning, error and info events.

Purpose
-------
Replace implicit event subscription with an explicit interface: a build logger
registers one handler per capability and holds no other relationship to the
engine.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from lib_gh_commands.domain.build_events import BuildErrorEvent, BuildMessageEvent, BuildWarningEvent

WarningHandler = Callable[[BuildWarningEvent], None]
ErrorHandler = Callable[[BuildErrorEvent], None]
MessageHandler = Callable[[BuildMessageEvent], None]


@runtime_checkable
class BuildEventSourcePort(Protocol):
    """Register handlers for the events a build engine raises."""

    def on_warning(self, handler: WarningHandler) -> None:
        """Invoke ``handler`` for every warning."""

    def on_error(self, handler: ErrorHandler) -> None:
        """Invoke ``handler`` for every error."""

    def on_info(self, handler: MessageHandler) -> None:
        """Invoke ``handler`` for every informational message."""


__all__ = ["BuildEventSourcePort", "ErrorHandler", "MessageHandler", "WarningHandler"]
