"""Error taxonomy raised at the library boundary."""

from __future__ import annotations


class CommandError(Exception):
    """Base class for every error raised by :mod:`lib_gh_commands`."""


class InvalidArgumentError(CommandError, ValueError):
    """A caller passed ``None`` or an empty value where one is required."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} must not be empty")


class InputRequiredError(CommandError, LookupError):
    """A required action input was not supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class DuplicateParameterError(CommandError, ValueError):
    """A logger parameter string names the same key twice."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate logger parameter: {key!r}")


def require_text(argument: str, value: str | None) -> str:
    """Return ``value`` or raise :class:`InvalidArgumentError` when it is empty.

    Examples
    --------
    >>> require_text("name", "FOO")
    'FOO'
    >>> require_text("name", "")
    Traceback (most recent call last):
    ...
    lib_gh_commands.domain.errors.InvalidArgumentError: name must not be empty
    """

    if value is None or value == "":
        raise InvalidArgumentError(argument)
    return value


__all__ = [
    "CommandError",
    "DuplicateParameterError",
    "InputRequiredError",
    "InvalidArgumentError",
    "require_text",
]
