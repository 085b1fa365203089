"""Environment stores implementing :class:`EnvironmentPort`.

Contents
--------
* :class:`OsEnvironment` - reads and writes :data:`os.environ`.
* :class:`MemoryEnvironment` - isolated dictionary, used by tests and by the
  CLI when a ``.env`` file is loaded.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping

from lib_gh_commands.application.ports.environment import EnvironmentPort


class OsEnvironment(EnvironmentPort):
    """Environment backed by the process environment."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, name: str) -> str | None:
        return self._environ.get(name)

    def set(self, name: str, value: str) -> None:
        self._environ[name] = value


class MemoryEnvironment(EnvironmentPort):
    """Environment held in a private dictionary.

    Examples
    --------
    >>> env = MemoryEnvironment({"INPUT_NAME": "value"})
    >>> env.get("INPUT_NAME")
    'value'
    >>> env.get("UNSET") is None
    True
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def update(self, values: Mapping[str, str], *, override: bool = True) -> None:
        """Merge ``values``; existing names are kept when ``override`` is false."""
        for name, value in values.items():
            if override or name not in self._values:
                self._values[name] = value

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)


__all__ = ["MemoryEnvironment", "OsEnvironment"]
