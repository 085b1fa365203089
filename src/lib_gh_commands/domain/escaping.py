"""Escaping rules for the two workflow-command contexts.

Purpose
-------
Transform raw strings before they are embedded into a workflow-command line so
the runner never mistakes payload characters for protocol delimiters.

Contents
--------
* :func:`escape_data` - message/data context.
* :func:`escape_property` - command name and property value context.

System Role
-----------
Leaf of the domain layer; :class:`lib_gh_commands.domain.command.WorkflowCommand`
calls these exactly once per field at construction time.
"""

from __future__ import annotations

_DATA_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("%", "%25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
)

_PROPERTY_REPLACEMENTS: tuple[tuple[str, str], ...] = _DATA_REPLACEMENTS + (
    (":", "%3A"),
    (",", "%2C"),
)
# Order matters: ``%`` goes first so later escape sequences are not re-escaped.


def _replace_all(value: str | None, replacements: tuple[tuple[str, str], ...]) -> str:
    text = value or ""
    for old, new in replacements:
        text = text.replace(old, new)
    return text


def escape_data(value: str | None) -> str:
    """Escape ``value`` for the message segment of a command line.

    Examples
    --------
    >>> escape_data("100%\\r\\ndone")
    '100%25%0D%0Adone'
    >>> escape_data(None)
    ''
    """

    return _replace_all(value, _DATA_REPLACEMENTS)


def escape_property(value: str | None) -> str:
    """Escape ``value`` for the command name or a property value.

    Examples
    --------
    >>> escape_property("a:b,c%d")
    'a%3Ab%2Cc%25d'
    """

    return _replace_all(value, _PROPERTY_REPLACEMENTS)


__all__ = ["escape_data", "escape_property"]
