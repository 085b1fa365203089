"""Parser for the ``key=value|key=value`` logger parameter string.

Purpose
-------
Turn the single parameter string handed to a build logger (for example
``Verbosity=Detailed|SolutionDir=/repo/``) into a case-insensitive lookup table.

Contents
--------
* :class:`LoggerParameters` - immutable table built by :meth:`LoggerParameters.parse`.

System Role
-----------
Consumed once per logger session by
:class:`lib_gh_commands.adapters.build_logger.GitHubBuildLogger`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from .errors import DuplicateParameterError

_PAIR_DELIMITER = "|"
_NAME_VALUE_DELIMITER = "="


class LoggerParameters:
    """Case-insensitive table of logger parameters.

    Looking up a name that was not supplied returns ``""`` rather than raising.

    Examples
    --------
    >>> params = LoggerParameters.parse("Verbosity=Detailed|SolutionDir=/repo/")
    >>> params["verbosity"]
    'Detailed'
    >>> params["missing"]
    ''
    """

    __slots__ = ("_values",)

    def __init__(self, parameters: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        pairs = parameters.items() if isinstance(parameters, Mapping) else parameters or ()
        values: dict[str, tuple[str, str]] = {}
        for key, value in pairs:
            folded = key.casefold()
            if folded in values:
                raise DuplicateParameterError(key)
            values[folded] = (key, value)
        self._values = MappingProxyType(values)

    @classmethod
    def parse(cls, text: str | None) -> "LoggerParameters":
        """Parse ``text``; pairs without ``=`` are skipped.

        Raises
        ------
        DuplicateParameterError
            When two pairs share a name (compared case-insensitively).
        """

        if not text:
            return cls()
        pairs: list[tuple[str, str]] = []
        for chunk in text.split(_PAIR_DELIMITER):
            key, delimiter, value = chunk.partition(_NAME_VALUE_DELIMITER)
            if not delimiter:
                continue
            pairs.append((key.strip(), value.strip()))
        return cls(pairs)

    def __getitem__(self, name: str) -> str:
        entry = self._values.get(name.casefold())
        return entry[1] if entry is not None else ""

    def get(self, name: str, default: str | None = None) -> str | None:
        entry = self._values.get(name.casefold())
        return entry[1] if entry is not None else default

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._values.values())

    def to_dict(self) -> dict[str, str]:
        """Return the parameters keyed by their original spelling."""

        return dict(self._values.values())

    def __repr__(self) -> str:
        return f"LoggerParameters({self.to_dict()!r})"


__all__ = ["LoggerParameters"]
