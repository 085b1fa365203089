"""Port for the environment-style key/value store read by action steps."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentPort(Protocol):
    """Read and write environment variables."""

    def get(self, name: str) -> str | None:
        """Return the value of ``name`` or ``None`` when unset."""

    def set(self, name: str, value: str) -> None:
        """Assign ``value`` to ``name``."""


__all__ = ["EnvironmentPort"]
