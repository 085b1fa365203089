"""Configuration helpers for running actions outside the runner.

Purpose
-------
Load action inputs and state from a ``.env`` file so an action can be
exercised locally with the same ``INPUT_*``/``STATE_*`` variables the runner
would provide.

Contents
--------
* :func:`should_use_dotenv` - resolve the CLI flag against the environment toggle.
* :func:`enable_dotenv` - load the nearest ``.env`` into an environment store.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

from lib_gh_commands.application.ports.environment import EnvironmentPort

logger = logging.getLogger(__name__)

DOTENV_TOGGLE = "LIB_GH_COMMANDS_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is enabled.

    An explicit CLI choice wins over the ``LIB_GH_COMMANDS_USE_DOTENV`` value.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    return (env_value or "").strip().lower() in _TRUTHY


def enable_dotenv(environment: EnvironmentPort, path: str | Path | None = None) -> Path | None:
    """Load ``path`` (default: nearest ``.env`` upwards from cwd) into ``environment``.

    Variables already present in ``environment`` keep their value. Returns the
    resolved file path, or ``None`` when no file was found.
    """

    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            logger.debug("no .env file found")
            return None
        path = found
    resolved = Path(path).resolve()
    for name, value in dotenv_values(resolved).items():
        if value is None or environment.get(name) is not None:
            continue
        environment.set(name, value)
    logger.debug("loaded environment from %s", resolved)
    return resolved


__all__ = ["DOTENV_TOGGLE", "enable_dotenv", "should_use_dotenv"]
