"""Protocols consumed by the application layer."""

from __future__ import annotations

from .build_events import BuildEventSourcePort, ErrorHandler, MessageHandler, WarningHandler
from .console import LineSinkPort
from .environment import EnvironmentPort

__all__ = [
    "BuildEventSourcePort",
    "EnvironmentPort",
    "ErrorHandler",
    "LineSinkPort",
    "MessageHandler",
    "WarningHandler",
]
