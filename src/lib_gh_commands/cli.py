"""Click command line interface issuing workflow commands.

Purpose
-------
Let shell steps and local runs emit workflow commands without writing Python:
``lib_gh_commands warning --file src/a.py --line 3 "careful"`` prints the
matching ``::warning`` line on stdout.

Contents
--------
* :func:`cli` - root group (``--version``, ``--use-dotenv``).
* Subcommands mirroring :class:`ActionsSession` operations plus ``replay``
  for JSON-lines build event logs.
* :func:`main` - test-friendly runner returning the exit status.
"""

from __future__ import annotations

import json
import os
from typing import Any, Sequence, TextIO

import click

from . import __init__conf__
from .adapters import BuildEventHub, MemoryEnvironment
from .config import DOTENV_TOGGLE, enable_dotenv, should_use_dotenv
from .domain.errors import CommandError
from .runtime import ActionsSession, create_build_logger, create_session

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``lib_gh_commands info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _session(ctx: click.Context) -> ActionsSession:
    return ctx.obj["session"]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load INPUT_*/STATE_* variables from the nearest .env file (default: ${DOTENV_TOGGLE}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Emit GitHub Actions workflow commands."""

    ctx.ensure_object(dict)
    if "session" not in ctx.obj:
        environment = None
        if should_use_dotenv(explicit=use_dotenv, env_value=os.environ.get(DOTENV_TOGGLE)):
            environment = MemoryEnvironment(os.environ)
            enable_dotenv(environment)
        ctx.obj["session"] = create_session(environment=environment)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("set-env", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("value")
@click.pass_context
def cli_set_env(ctx: click.Context, name: str, value: str) -> None:
    """Export NAME=VALUE to the following job steps."""

    try:
        _session(ctx).export_variable(name, value)
    except CommandError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("set-output", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("value")
@click.pass_context
def cli_set_output(ctx: click.Context, name: str, value: str) -> None:
    """Set output parameter NAME of the current step."""

    try:
        _session(ctx).set_output(name, value)
    except CommandError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("add-path", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path")
@click.pass_context
def cli_add_path(ctx: click.Context, path: str) -> None:
    """Prepend PATH to the system path of the following steps."""

    try:
        _session(ctx).add_path(path)
    except CommandError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("mask", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.pass_context
def cli_mask(ctx: click.Context, value: str) -> None:
    """Mask VALUE in the log."""

    _session(ctx).set_secret(value)


@cli.command("debug", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.pass_context
def cli_debug(ctx: click.Context, message: str) -> None:
    """Write a debug message."""

    _session(ctx).debug(message)


def _position_options(func: Any) -> Any:
    func = click.option("--col", type=int, default=None, help="Column number.")(func)
    func = click.option("--line", type=int, default=None, help="Line number.")(func)
    func = click.option("--file", "file", default=None, help="Source file the message refers to.")(func)
    return func


@cli.command("warning", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@_position_options
@click.pass_context
def cli_warning(ctx: click.Context, message: str, file: str | None, line: int | None, col: int | None) -> None:
    """Create a warning annotation."""

    _session(ctx).warning(message, file=file, line=line, col=col)


@cli.command("error", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@_position_options
@click.pass_context
def cli_error(ctx: click.Context, message: str, file: str | None, line: int | None, col: int | None) -> None:
    """Create an error annotation."""

    _session(ctx).error(message, file=file, line=line, col=col)


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.pass_context
def cli_fail(ctx: click.Context, message: str) -> None:
    """Report MESSAGE as an error and exit with status 1."""

    session = _session(ctx)
    session.set_failed(message)
    ctx.exit(session.exit_code)


@cli.command("get-input", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.option("--required", is_flag=True, help="Fail when the input is missing or empty.")
@click.pass_context
def cli_get_input(ctx: click.Context, name: str, required: bool) -> None:
    """Print the trimmed value of action input NAME."""

    try:
        value = _session(ctx).get_input(name, required=required)
    except CommandError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(value)


@cli.command("get-state", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_get_state(ctx: click.Context, name: str) -> None:
    """Print state NAME saved by the main step."""

    click.echo(_session(ctx).get_state(name) or "")


@cli.command("replay", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("events", type=click.File("r"), default="-")
@click.option(
    "--parameters",
    "-p",
    default="",
    help="Logger parameters, e.g. 'Verbosity=Detailed|SolutionDir=.'.",
)
@click.pass_context
def cli_replay(ctx: click.Context, events: TextIO, parameters: str) -> None:
    """Feed JSON-lines build events through the build logger.

    Each line is an object with ``kind`` (warning, error or info), ``message``
    and optional ``code``, ``file``, ``line``, ``column`` and ``importance``.
    """

    session = _session(ctx)
    hub = BuildEventHub()
    try:
        create_build_logger(session, parameters=parameters).initialize(hub)
    except CommandError as exc:
        raise click.ClickException(str(exc)) from exc
    for number, raw in enumerate(events, start=1):
        if not raw.strip():
            continue
        try:
            hub.raise_record(json.loads(raw))
        except (ValueError, TypeError, AttributeError) as exc:
            raise click.ClickException(f"line {number}: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return the exit status.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_gh_commands, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main", "summary_info"]
