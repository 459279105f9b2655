"""Library configuration: OptvalConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from optval._logging import configure_logging

__all__ = [
    'OptvalConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'OPTVAL_LOG_LEVEL'
LOG_FORMAT_ENV = 'OPTVAL_LOG_FORMAT'


@dataclass(frozen=True)
class OptvalConfig:
    """Configuration for optval.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console-rendered logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: OptvalConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OPTVAL_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from OPTVAL_LOG_FORMAT ("json" or "console").

    Defaults to JSON when unset or unrecognised.
    """
    fmt = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
) -> OptvalConfig:
    """Initialize optval with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            OPTVAL_LOG_LEVEL if None; stays silent if that is unset too.
        json_logs: JSON (True) or console (False) output. Read from
            OPTVAL_LOG_FORMAT if None.

    Returns:
        The OptvalConfig that was set.

    Example:
        ```python
        import optval

        optval.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = (log_level.strip().upper() or None) if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = OptvalConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptvalConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'optval not initialized. Call optval.init() first.'
        raise RuntimeError(msg)
    return _config
