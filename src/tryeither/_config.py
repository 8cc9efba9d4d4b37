"""Process-wide configuration: Try memoization and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from tryeither._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class Config:
    """Configuration for tryeither.

    Attributes:
        memoize: Whether a Try caches its outcome after the first run.
            Individual Trys can still override this at construction.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON when `log_level` configures logging.
    """

    memoize: bool = True
    log_level: str | None = None
    json_logs: bool = True


_config: Config | None = None


def _detect_memoize() -> bool:
    """Read memoization from the TRYEITHER_MEMOIZE environment variable.

    Unknown values fall back to the default (memoize) with a warning.
    """
    raw = os.environ.get('TRYEITHER_MEMOIZE', '').strip().lower()
    if not raw or raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logging.warning("Unknown TRYEITHER_MEMOIZE value '%s', defaulting to memoize", raw)
    return True


def _detect_log_level() -> str | None:
    """Read the log level from TRYEITHER_LOG_LEVEL, if set."""
    raw = os.environ.get('TRYEITHER_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    memoize: bool | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> Config:
    """Initialize tryeither with the given configuration.

    Args:
        memoize: Default memoization for new Trys. Read from the environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the environment if None.
        json_logs: Emit JSON when logging gets configured.

    Returns:
        The Config that was set.

    Example:
        ```python
        from tryeither import init

        init(memoize=False, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        memoize=_detect_memoize() if memoize is None else memoize,
        log_level=_detect_log_level() if log_level is None else log_level,
        json_logs=json_logs,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    When `init` has not been called, a configuration is derived from the
    environment and cached without touching logging.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = Config(memoize=_detect_memoize(), log_level=_detect_log_level())
    return _config


def reset() -> None:
    """Drop the current configuration so the next lookup re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
