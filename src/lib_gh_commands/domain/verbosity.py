"""Logger verbosity and build message importance.

Purpose
-------
Model the ordered verbosity threshold configured on a build logger and the
importance attached to informational build messages, and decide whether a
message is surfaced.

Contents
--------
* :class:`LoggerVerbosity` - ordered threshold with a lenient parser.
* :class:`MessageImportance` - importance of an informational message.
* :func:`is_message_visible` - gating rule.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class LoggerVerbosity(IntEnum):
    """Ordered verbosity levels, quietest first."""

    QUIET = 0
    MINIMAL = 1
    NORMAL = 2
    DETAILED = 3
    DIAGNOSTIC = 4

    @classmethod
    def from_name(cls, name: str) -> "LoggerVerbosity":
        """Parse ``name`` case-insensitively; numeric strings are accepted too.

        Examples
        --------
        >>> LoggerVerbosity.from_name("detailed")
        <LoggerVerbosity.DETAILED: 3>
        >>> LoggerVerbosity.from_name("4")
        <LoggerVerbosity.DIAGNOSTIC: 4>
        """

        normalized = name.strip()
        if normalized.lstrip("+-").isdigit():
            try:
                return cls(int(normalized))
            except ValueError as exc:
                raise ValueError(f"Unknown verbosity: {name!r}") from exc
        try:
            return cls[normalized.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown verbosity: {name!r}") from exc


class MessageImportance(Enum):
    """Importance attached to informational build messages."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @classmethod
    def from_name(cls, name: str) -> "MessageImportance":
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown message importance: {name!r}") from exc


_MINIMUM_VERBOSITY = {
    MessageImportance.HIGH: LoggerVerbosity.MINIMAL,
    MessageImportance.NORMAL: LoggerVerbosity.DETAILED,
    MessageImportance.LOW: LoggerVerbosity.DIAGNOSTIC,
}
# Lowest verbosity at which a message of the given importance is shown.


def is_message_visible(importance: MessageImportance, verbosity: LoggerVerbosity) -> bool:
    """Return ``True`` when a message of ``importance`` passes ``verbosity``.

    Examples
    --------
    >>> is_message_visible(MessageImportance.NORMAL, LoggerVerbosity.NORMAL)
    False
    >>> is_message_visible(MessageImportance.NORMAL, LoggerVerbosity.DETAILED)
    True
    """

    return verbosity >= _MINIMUM_VERBOSITY[importance]


__all__ = ["LoggerVerbosity", "MessageImportance", "is_message_visible"]
