"""Line sink port describing where rendered commands are written.

Purpose
-------
Define the abstraction for adapters that append complete lines to the stream
read by the Actions runner (normally stdout), letting the application layer
depend on a narrow protocol.

Contents
--------
* :class:`LineSinkPort` - runtime-checkable protocol with a single
  ``write_line`` method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSinkPort(Protocol):
    """Append one complete line to the output stream."""

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a line terminator."""


__all__ = ["LineSinkPort"]
