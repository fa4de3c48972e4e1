"""Environment-driven configuration and optional ``.env`` loading.

Purpose
-------
Centralise the few settings the CLI and façade read from the environment, and
offer opt-in ``.env`` discovery through :mod:`dotenv` without ever overriding
variables already present in the process environment.

Contents
--------
* :data:`CODEC_ENV_VAR` / :func:`default_codec` - default codec selection.
* :data:`DOTENV_ENV_VAR` / :func:`should_use_dotenv` - ``.env`` toggle.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.

System Role
-----------
Read by :mod:`serializable_log_record.__main__` and by the façade's
``encode``/``decode`` helpers when no codec is named explicitly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

CODEC_ENV_VAR = "SERIALIZABLE_LOG_RECORD_CODEC"
DOTENV_ENV_VAR = "SERIALIZABLE_LOG_RECORD_USE_DOTENV"
DEFAULT_CODEC = "json"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def default_codec() -> str:
    """Return the codec name configured via :data:`CODEC_ENV_VAR`.

    Examples
    --------
    >>> import os
    >>> previous = os.environ.pop(CODEC_ENV_VAR, None)
    >>> default_codec()
    'json'
    >>> if previous is not None:
    ...     os.environ[CODEC_ENV_VAR] = previous
    """

    value = os.getenv(CODEC_ENV_VAR, "").strip().lower()
    return value or DEFAULT_CODEC


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled; the explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value='1')
    False
    >>> should_use_dotenv(explicit=None, env_value='yes')
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized and normalized not in _FALSY:
        logger.warning("Ignoring unrecognised %s value %r", DOTENV_ENV_VAR, env_value)
    return False


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks up from ``search_from`` (default: the current working
    directory). Loading happens at most once per process; later calls return
    the path found by the first one.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    if _DOTENV_ATTEMPTED:
        return _DOTENV_LOADED
    _DOTENV_ATTEMPTED = True

    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
    else:
        candidate = _find_dotenv_from(search_from)
    if candidate is None:
        logger.debug("No .env file found above %s", search_from or Path.cwd())
        return None
    load_dotenv(candidate, override=False)
    _DOTENV_LOADED = candidate
    logger.debug("Loaded environment from %s", candidate)
    return candidate


def _find_dotenv_from(start: Path) -> Path | None:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    _DOTENV_LOADED = None
    _DOTENV_ATTEMPTED = False


__all__ = [
    "CODEC_ENV_VAR",
    "DEFAULT_CODEC",
    "DOTENV_ENV_VAR",
    "default_codec",
    "enable_dotenv",
    "should_use_dotenv",
]
