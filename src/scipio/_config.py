"""Library configuration: TryConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from scipio._logging import configure_logging, reset_logging
from scipio.errors import InvalidArgumentError

__all__ = [
    'TryConfig',
    'get_config',
    'init',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class TryConfig:
    """Configuration for scipio.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON rather than console text.
    """

    log_level: str | None = None
    json_output: bool = True

    @property
    def logging_enabled(self) -> bool:
        return self.log_level is not None


# Global configuration (set by init())
_config: TryConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from SCIPIO_LOG_LEVEL, if set and valid."""
    env_level = os.environ.get('SCIPIO_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown SCIPIO_LOG_LEVEL value '%s', logging stays off", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read the output format from SCIPIO_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('SCIPIO_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown SCIPIO_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> TryConfig:
    """Initialize scipio with the given configuration.

    Values not passed explicitly are taken from the environment
    (SCIPIO_LOG_LEVEL, SCIPIO_LOG_FORMAT), then from the defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs (True) or console logs (False).

    Returns:
        The TryConfig that was set.

    Raises:
        InvalidArgumentError: If log_level is not a known level name.

    Example:
        ```python
        import scipio

        # Log every captured exception
        scipio.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is not None:
        resolved_level = log_level.upper()
        if resolved_level not in _LEVELS:
            raise InvalidArgumentError('log_level', f"must be one of {', '.join(_LEVELS)}, got {log_level!r}")
    else:
        resolved_level = _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = TryConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> TryConfig:
    """Get the current configuration.

    Unlike a runtime that must be started, scipio works without init():
    until it is called, the default silent TryConfig() is returned.
    """
    if _config is None:
        return TryConfig()
    return _config


def reset() -> None:
    """Forget any configuration set by init() and unconfigure the library logger."""
    global _config  # noqa: PLW0603
    _config = None
    reset_logging()
