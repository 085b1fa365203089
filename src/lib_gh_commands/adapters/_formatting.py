"""Formatting helpers turning build diagnostics into annotation text."""

from __future__ import annotations

from lib_gh_commands.domain.build_events import BuildDiagnosticEvent


def format_build_event(event: BuildDiagnosticEvent) -> str:
    """Return the human-readable message carried by an annotation.

    The position travels in the command properties, so only the subcategory,
    diagnostic code and text are rendered here.

    Examples
    --------
    >>> from lib_gh_commands.domain.build_events import BuildWarningEvent
    >>> format_build_event(BuildWarningEvent("unused variable", code="CS0168"))
    'CS0168: unused variable'
    >>> format_build_event(BuildWarningEvent("plain"))
    'plain'
    """

    prefix = " ".join(part for part in (event.subcategory, event.code) if part)
    if not prefix:
        return event.message
    return f"{prefix}: {event.message}"


__all__ = ["format_build_event"]
