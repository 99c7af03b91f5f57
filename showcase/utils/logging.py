"""Root logger setup for the showcase screens.

``SHOWCASE_LOG_LEVEL`` names an explicit level (``"warning"``, ``"10"``).
Failing that, a truthy ``SHOWCASE_DEBUG_LOGGING`` or ``SHOWCASE_DEBUG``
selects DEBUG. Either one wins over the ``debug_logging`` setting.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

LEVEL_ENV = "SHOWCASE_LOG_LEVEL"
DEBUG_ENVS = ("SHOWCASE_DEBUG_LOGGING", "SHOWCASE_DEBUG")

# Connection-pool chatter from requests; only shown when debugging.
HTTP_LOGGER = "urllib3"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn a level name or number into an int, ``fallback`` if unrecognised."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    named = logging.getLevelName(text.upper()) if text else None
    return named if isinstance(named, int) else fallback


def env_override(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit)
    for name in DEBUG_ENVS:
        if (env.get(name) or "").strip().lower() in _TRUTHY:
            return logging.DEBUG
    return None


def _set_level(level: int) -> int:
    logging.getLogger().setLevel(level)
    logging.getLogger(HTTP_LOGGER).setLevel(level if level <= logging.DEBUG else logging.WARNING)
    return level


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the compact handler once and set the effective root level."""
    override = env_override()
    level = override if override is not None else parse_level(default_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    return _set_level(level)


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the ``debug_logging`` setting unless the environment overrides it."""
    override = env_override()
    if override is not None:
        return _set_level(override)
    return _set_level(logging.DEBUG if debug_enabled else logging.INFO)


def level_name(level: int) -> str:
    return logging.getLevelName(level)


__all__ = [
    "apply_preferences",
    "configure_root",
    "env_override",
    "level_name",
    "parse_level",
]
