"""Adapter implementations bridging ports to concrete infrastructure."""

from __future__ import annotations

from ._formatting import format_build_event
from .build_events import BuildEventHub
from .build_logger import GitHubBuildLogger, relative_to_root
from .console import RichConsoleSink
from .environment import MemoryEnvironment, OsEnvironment

__all__ = [
    "BuildEventHub",
    "GitHubBuildLogger",
    "MemoryEnvironment",
    "OsEnvironment",
    "RichConsoleSink",
    "format_build_event",
    "relative_to_root",
]
