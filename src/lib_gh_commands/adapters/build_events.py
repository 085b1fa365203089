"""In-process build event hub implementing :class:`BuildEventSourcePort`.

Purpose
-------
Let host code (or the CLI ``replay`` command) raise build events and fan them
out to every registered handler, mirroring how a build engine would call its
subscribed loggers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_gh_commands.application.ports.build_events import (
    BuildEventSourcePort,
    ErrorHandler,
    MessageHandler,
    WarningHandler,
)
from lib_gh_commands.domain.build_events import BuildErrorEvent, BuildMessageEvent, BuildWarningEvent
from lib_gh_commands.domain.verbosity import MessageImportance

LOGGER = logging.getLogger(__name__)


class BuildEventHub(BuildEventSourcePort):
    """Dispatch raised events to the handlers registered for their kind."""

    def __init__(self) -> None:
        self._warning_handlers: list[WarningHandler] = []
        self._error_handlers: list[ErrorHandler] = []
        self._info_handlers: list[MessageHandler] = []

    def on_warning(self, handler: WarningHandler) -> None:
        self._warning_handlers.append(handler)

    def on_error(self, handler: ErrorHandler) -> None:
        self._error_handlers.append(handler)

    def on_info(self, handler: MessageHandler) -> None:
        self._info_handlers.append(handler)

    def raise_warning(self, event: BuildWarningEvent) -> None:
        for handler in list(self._warning_handlers):
            handler(event)

    def raise_error(self, event: BuildErrorEvent) -> None:
        for handler in list(self._error_handlers):
            handler(event)

    def raise_info(self, event: BuildMessageEvent) -> None:
        for handler in list(self._info_handlers):
            handler(event)

    def raise_record(self, record: Mapping[str, Any]) -> None:
        """Raise the event described by a decoded JSON ``record``.

        ``record["kind"]`` selects ``warning``, ``error`` or ``info``; the other
        keys map onto the event fields (``line`` and ``column`` are accepted as
        short names).

        Examples
        --------
        >>> hub = BuildEventHub()
        >>> seen = []
        >>> hub.on_error(seen.append)
        >>> hub.raise_record({"kind": "error", "message": "boom", "code": "E1", "line": 4})
        >>> seen[0].line_number
        4
        """

        kind = str(record.get("kind", "")).strip().lower()
        LOGGER.debug("replaying %s build event", kind or "untyped")
        message = str(record.get("message", ""))
        position = {
            "file": record.get("file"),
            "line_number": int(record.get("line", record.get("line_number", 0)) or 0),
            "column_number": int(record.get("column", record.get("column_number", 0)) or 0),
        }
        if kind == "warning":
            self.raise_warning(BuildWarningEvent(message, code=record.get("code"), subcategory=record.get("subcategory"), **position))
        elif kind == "error":
            self.raise_error(BuildErrorEvent(message, code=record.get("code"), subcategory=record.get("subcategory"), **position))
        elif kind in {"info", "message"}:
            importance = MessageImportance.from_name(str(record.get("importance", "normal")))
            self.raise_info(BuildMessageEvent(message, importance=importance, code=record.get("code"), **position))
        else:
            raise ValueError(f"Unknown build event kind: {kind!r}")


__all__ = ["BuildEventHub"]
