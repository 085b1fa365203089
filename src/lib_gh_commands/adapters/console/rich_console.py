"""Rich-owned line sink implementing :class:`LineSinkPort`.

Purpose
-------
Write protocol lines to stdout through the stream owned by a Rich
:class:`~rich.console.Console`, so the CLI and library share one console
abstraction.

Contents
--------
* :class:`RichConsoleSink` - adapter constructed by
  :func:`lib_gh_commands.runtime.create_session`.

System Role
-----------
Primary runner-facing sink. The runner parses these lines verbatim, so text is
written to ``console.file`` as is: rendering through ``Console.print`` would
expand tabs and strip control characters such as bell or form feed.
"""

from __future__ import annotations

from rich.console import Console

from lib_gh_commands.application.ports.console import LineSinkPort


class RichConsoleSink(LineSinkPort):
    """Write complete lines to the file of a Rich :class:`~rich.console.Console`."""

    def __init__(self, *, console: Console | None = None, stderr: bool = False) -> None:
        """Use ``console`` when given, otherwise a plain console on stdout/stderr."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, line: str) -> None:
        """Write ``line`` byte for byte, followed by a newline.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO())
        >>> RichConsoleSink(console=console).write_line("::debug::a\\tb [bold]x[/bold]")
        >>> console.file.getvalue()
        '::debug::a\\tb [bold]x[/bold]\\n'
        """

        stream = self._console.file
        stream.write(line + "\n")
        stream.flush()


__all__ = ["RichConsoleSink"]
