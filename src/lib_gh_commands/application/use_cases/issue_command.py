"""Use case writing rendered workflow commands to the output sink.

Purpose
-------
Render a :class:`WorkflowCommand` and hand the resulting line to a
:class:`LineSinkPort`, one complete write per call, and support deferring a
command until the end of a caller's scope.

Contents
--------
* :class:`CommandIssuer` - serialising writer around the sink.
* :class:`DeferredCommandIssue` - release-once handle, usable with ``with``.

System Role
-----------
The single point where protocol lines leave the library. Build engines may
raise events from worker threads, so every write happens under one lock.
"""

from __future__ import annotations

import logging
import threading
from types import TracebackType

from lib_gh_commands.application.ports.console import LineSinkPort
from lib_gh_commands.domain.command import WorkflowCommand

logger = logging.getLogger(__name__)


class CommandIssuer:
    """Render and write commands to ``sink`` one line at a time.

    Examples
    --------
    >>> class ListSink:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def write_line(self, line):
    ...         self.lines.append(line)
    >>> sink = ListSink()
    >>> CommandIssuer(sink).issue(WorkflowCommand.debug_message("hi"))
    >>> sink.lines
    ['::debug::hi']
    """

    def __init__(self, sink: LineSinkPort) -> None:
        self._sink = sink
        self._lock = threading.Lock()

    @property
    def sink(self) -> LineSinkPort:
        return self._sink

    def issue(self, command: WorkflowCommand | None) -> None:
        """Write the canonical line of ``command``; ``None`` is ignored."""

        if command is None:
            return
        self.write_line(command.render())

    def write_line(self, line: str) -> None:
        """Write a raw line that is not part of the command protocol."""

        with self._lock:
            self._sink.write_line(line)

    def defer(self, command: WorkflowCommand) -> "DeferredCommandIssue":
        return DeferredCommandIssue(self, command)


class DeferredCommandIssue:
    """Hold ``command`` until :meth:`release` is called or the scope exits.

    Releasing more than once writes nothing further.
    """

    __slots__ = ("_issuer", "_command", "_lock")

    def __init__(self, issuer: CommandIssuer, command: WorkflowCommand) -> None:
        self._issuer = issuer
        self._command: WorkflowCommand | None = command
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """Return ``True`` until the command has been issued."""

        return self._command is not None

    @property
    def command(self) -> WorkflowCommand | None:
        return self._command

    def release(self) -> None:
        with self._lock:
            command, self._command = self._command, None
        if command is None:
            logger.debug("deferred command already released")
            return
        self._issuer.issue(command)

    def __enter__(self) -> "DeferredCommandIssue":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


__all__ = ["CommandIssuer", "DeferredCommandIssue"]
