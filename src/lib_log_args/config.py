"""Environment-driven configuration for the wrapping options.

Purpose
-------
Let deployments tune :class:`WrapOptions` through environment variables and,
on request, a nearby ``.env`` file, without code changes.

Contents
--------
* ``*_ENV_VAR`` constants – recognised variable names.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – ``.env`` loading.
* :func:`options_from_env` – build :class:`WrapOptions` from the environment.

System Role
-----------
Used by the CLI and available to host applications; the wrapping layer itself
only ever receives a finished :class:`WrapOptions`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from lib_log_args.domain.options import WrapOptions

DOTENV_ENV_VAR = "LOG_ARGS_USE_DOTENV"
PAYLOAD_KEY_ENV_VAR = "LOG_ARGS_PAYLOAD_KEY"
ERROR_INDICATOR_KEY_ENV_VAR = "LOG_ARGS_ERROR_INDICATOR_KEY"
ALWAYS_SHOW_ENV_VAR = "LOG_ARGS_ALWAYS_SHOW_ERROR_INDICATOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

logger = logging.getLogger(__name__)

_DOTENV_PATH: Path | None = None


def parse_flag(value: str, *, name: str) -> bool:
    """Interpret a boolean environment value.

    Examples
    --------
    >>> parse_flag("Yes", name="X"), parse_flag("0", name="X")
    (True, False)
    >>> parse_flag("maybe", name="X")
    Traceback (most recent call last):
    ...
    ValueError: X must be one of 1/0, true/false, yes/no, on/off (got 'maybe')
    """

    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off (got {value!r})")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested; an explicit flag wins over the environment."""

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return parse_flag(env_value, name=DOTENV_ENV_VAR)


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding variables that are already set.

    The search walks upwards from the working directory. Returns the resolved
    path of the loaded file, or ``None`` when no file was found.
    """

    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    located = find_dotenv(usecwd=True)
    if not located:
        logger.debug("no .env file found above %s", Path.cwd())
        return None
    found = Path(located).resolve()
    load_dotenv(found, override=False)
    _DOTENV_PATH = found
    logger.debug("loaded environment from %s", found)
    return found


def options_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    payload_key: str | None = None,
    error_indicator_key: str | None = None,
    always_show_error_indicator: bool | None = None,
) -> WrapOptions:
    """Build :class:`WrapOptions`; keyword arguments win over the environment.

    Examples
    --------
    >>> options_from_env({"LOG_ARGS_PAYLOAD_KEY": "data", "LOG_ARGS_ALWAYS_SHOW_ERROR_INDICATOR": "on"})
    WrapOptions(payload_key='data', error_indicator_key='isError', always_show_error_indicator=True)
    >>> options_from_env({"LOG_ARGS_PAYLOAD_KEY": "data"}, payload_key="body").payload_key
    'body'
    """

    source = os.environ if environ is None else environ
    defaults = WrapOptions()
    if payload_key is None:
        payload_key = source.get(PAYLOAD_KEY_ENV_VAR) or defaults.payload_key
    if error_indicator_key is None:
        error_indicator_key = source.get(ERROR_INDICATOR_KEY_ENV_VAR) or defaults.error_indicator_key
    if always_show_error_indicator is None:
        raw = source.get(ALWAYS_SHOW_ENV_VAR)
        always_show_error_indicator = defaults.always_show_error_indicator if raw is None else parse_flag(raw, name=ALWAYS_SHOW_ENV_VAR)
    return WrapOptions(
        payload_key=payload_key,
        error_indicator_key=error_indicator_key,
        always_show_error_indicator=always_show_error_indicator,
    )


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


__all__ = [
    "ALWAYS_SHOW_ENV_VAR",
    "DOTENV_ENV_VAR",
    "ERROR_INDICATOR_KEY_ENV_VAR",
    "PAYLOAD_KEY_ENV_VAR",
    "enable_dotenv",
    "options_from_env",
    "parse_flag",
    "should_use_dotenv",
]
