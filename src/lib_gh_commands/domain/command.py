"""Immutable workflow command value object.

Purpose
-------
Represent a single workflow command (name, ordered properties, message) and
render it to the one-line wire format consumed by the Actions runner::

    ::name key=value,key=value::message

Contents
--------
* :class:`WorkflowCommand` - frozen dataclass with factories for every
  well-known command kind.
* :func:`to_command_value` - conversion of arbitrary payloads to strings.

System Role
-----------
Domain core. The escaped projections are computed once in ``__post_init__`` so
every field passes through the escaper exactly once, however often the command
is rendered.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from . import names
from .errors import require_text
from .escaping import escape_data, escape_property

PropertyPairs = tuple[tuple[str, "str | None"], ...]


def to_command_value(value: Any) -> str:
    """Convert ``value`` to the string carried by a command.

    ``None`` becomes the empty string, strings pass through and everything else
    is serialised to JSON.

    Examples
    --------
    >>> to_command_value(None)
    ''
    >>> to_command_value("text")
    'text'
    >>> to_command_value({"a": 1})
    '{"a": 1}'
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _normalise_properties(
    properties: Mapping[str, str | None] | Iterable[tuple[str, str | None]] | None,
) -> PropertyPairs:
    if properties is None:
        return ()
    items = properties.items() if isinstance(properties, Mapping) else properties
    return tuple((str(key), value) for key, value in items)


def _escape_properties(properties: PropertyPairs) -> str:
    rendered = [f"{key}={escape_property(value)}" for key, value in properties if value is not None and value != ""]
    return ",".join(rendered)


def _position_properties(file: str | None, line: int | None, col: int | None) -> PropertyPairs:
    pairs: list[tuple[str, str | None]] = []
    if file:
        pairs.append(("file", file))
    if line is not None:
        pairs.append(("line", str(int(line))))
    if col is not None:
        pairs.append(("col", str(int(col))))
    return tuple(pairs)


@dataclass(slots=True, frozen=True)
class WorkflowCommand:
    """A workflow command together with its escaped rendering.

    Attributes
    ----------
    name:
        Command name; ``None`` or ``""`` is replaced by ``missing.command``.
    properties:
        Ordered ``(key, value)`` pairs. Pairs whose value is ``None`` or empty
        are kept here but omitted from the rendered line.
    message:
        Free-text payload; ``None`` becomes ``""``.

    Examples
    --------
    >>> str(WorkflowCommand.set_environment_variable("FOO", "bar"))
    '::set-env name=FOO::bar'
    >>> str(WorkflowCommand(None))
    '::missing.command::'
    """

    name: str | None
    properties: PropertyPairs = ()
    message: str | None = ""
    escaped_name: str = field(init=False, repr=False, compare=False)
    escaped_properties: str = field(init=False, repr=False, compare=False)
    escaped_message: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        name = self.name or names.MISSING_COMMAND
        properties = _normalise_properties(self.properties)
        message = self.message if self.message is not None else ""
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "properties", properties)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "escaped_name", escape_property(name))
        object.__setattr__(self, "escaped_properties", _escape_properties(properties))
        object.__setattr__(self, "escaped_message", escape_data(message))

    def render(self) -> str:
        """Return the canonical single-line representation."""

        head = names.COMMAND_MARKER + self.escaped_name
        if self.escaped_properties:
            head = f"{head} {self.escaped_properties}"
        return head + names.COMMAND_MARKER + self.escaped_message

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def create(
        cls,
        name: str | None,
        properties: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        message: Any = None,
    ) -> "WorkflowCommand":
        """Build a command from arbitrary values using :func:`to_command_value`.

        Examples
        --------
        >>> str(WorkflowCommand.create("save-state", {"name": "run"}, {"n": 1}))
        '::save-state name=run::{"n": 1}'
        """

        pairs = tuple((key, to_command_value(value)) for key, value in _normalise_properties(properties))
        return cls(name, pairs, to_command_value(message))

    @classmethod
    def set_environment_variable(cls, name: str, value: str | None) -> "WorkflowCommand":
        """Create or update an environment variable for subsequent job steps."""

        return cls(names.EXPORT_VARIABLE, (("name", require_text("name", name)),), value)

    @classmethod
    def set_output_parameter(cls, name: str, value: str | None) -> "WorkflowCommand":
        """Set an output parameter of the running action."""

        return cls(names.SET_OUTPUT, (("name", require_text("name", name)),), value)

    @classmethod
    def add_system_path(cls, path: str) -> "WorkflowCommand":
        """Prepend ``path`` to ``PATH`` for subsequent job steps."""

        return cls(names.ADD_PATH, (), path)

    @classmethod
    def debug_message(cls, message: str) -> "WorkflowCommand":
        return cls(names.DEBUG, (), message)

    @classmethod
    def warning_message(
        cls,
        message: str,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> "WorkflowCommand":
        """Create a warning annotation, optionally anchored to a source position.

        Examples
        --------
        >>> str(WorkflowCommand.warning_message("careful", "src/a.py", 3, 7))
        '::warning file=src/a.py,line=3,col=7::careful'
        >>> str(WorkflowCommand.warning_message("message text"))
        '::warning::message text'
        """

        return cls(names.WARNING, _position_properties(file, line, col), message)

    @classmethod
    def error_message(
        cls,
        message: str,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> "WorkflowCommand":
        """Create an error annotation, optionally anchored to a source position."""

        return cls(names.ERROR, _position_properties(file, line, col), message)

    @classmethod
    def mask_value_in_log(cls, value: str) -> "WorkflowCommand":
        """Register ``value`` as a secret the runner masks in the log."""

        return cls(names.SET_SECRET, (), value)

    @classmethod
    def start_group(cls, name: str) -> "WorkflowCommand":
        return cls(names.START_GROUP, (), name)

    @classmethod
    def end_group(cls, name: str | None = None) -> "WorkflowCommand":
        return cls(names.END_GROUP, (), name)

    @classmethod
    def save_state(cls, name: str, value: str | None) -> "WorkflowCommand":
        """Save state readable by the post-job step of the same action."""

        return cls(names.SAVE_STATE, (("name", require_text("name", name)),), value)

    @classmethod
    def stop_processing(cls, token: str) -> "WorkflowCommand":
        """Stop command processing until ``token`` is issued as a command."""

        return cls(names.STOP_PROCESSING, (), require_text("token", token))

    @classmethod
    def resume(cls, token: str) -> "WorkflowCommand":
        """Return the command resuming processing stopped with ``token``.

        Examples
        --------
        >>> str(WorkflowCommand.resume("abc123"))
        '::abc123::'
        """

        return cls(require_text("token", token))

    @classmethod
    def echo(cls, enabled: bool) -> "WorkflowCommand":
        return cls(names.ECHO, (), "on" if enabled else "off")


__all__ = ["WorkflowCommand", "to_command_value"]
