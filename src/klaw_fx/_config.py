"""Library configuration: FxConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_fx._logging import configure_logging

__all__ = [
    'FxConfig',
    'get_config',
    'init',
    'reset_config',
]

_LOG_LEVEL_ENV = 'KLAW_FX_LOG_LEVEL'
_JSON_LOGS_ENV = 'KLAW_FX_JSON_LOGS'
_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class FxConfig:
    """Configuration for klaw-fx.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: FxConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_FX_LOG_LEVEL."""
    env_level = os.environ.get(_LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown %s value '%s', logging stays off", _LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the output format from KLAW_FX_JSON_LOGS (default: JSON)."""
    return os.environ.get(_JSON_LOGS_ENV, '1').lower() not in ('0', 'false', 'no', 'off')


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
) -> FxConfig:
    """Initialize klaw-fx.

    Explicit arguments win over the environment variables. When a log level
    ends up set, structlog is configured for it.

    Args:
        log_level: Logging level. None = read KLAW_FX_LOG_LEVEL.
        json_logs: JSON or console output. None = read KLAW_FX_JSON_LOGS.

    Returns:
        The active configuration.

    Example:
        ```python
        from klaw_fx import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config

    config = FxConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )
    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    return config


def get_config() -> FxConfig:
    """Return the active configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the active configuration (mostly useful in tests)."""
    global _config
    _config = None
