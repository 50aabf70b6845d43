"""Library configuration: FunctionalConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fnkit._logging import configure_logging

__all__ = [
    'FunctionalConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class FunctionalConfig:
    """Configuration for fnkit.

    Attributes:
        log_level: Logging level for the ``fnkit`` loggers. None = silent.
        json_logs: Render log events as JSON (True) or for the console.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: FunctionalConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FNKIT_LOG_LEVEL.

    Unknown values are reported and ignored.
    """
    env_level = os.environ.get('FNKIT_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown FNKIT_LOG_LEVEL value '%s', logging stays disabled", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the log format from FNKIT_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('FNKIT_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown FNKIT_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> FunctionalConfig:
    """Initialize fnkit with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            FNKIT_LOG_LEVEL if None; logging stays silent if both are unset.
        json_logs: JSON (True) or console (False) rendering. Read from
            FNKIT_LOG_FORMAT if None.

    Returns:
        The FunctionalConfig that was set.

    Example:
        ```python
        from fnkit import init

        # Environment driven
        init()

        # Explicit configuration
        init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = FunctionalConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FunctionalConfig:
    """Get the current configuration.

    Returns:
        The current FunctionalConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fnkit not initialized. Call fnkit.init() first.'
        raise RuntimeError(msg)
    return _config
