"""
Environment configuration for exprtree.

The core library configures nothing itself; the ``expr`` command reads
its log level from the EXPRTREE_LOG_LEVEL environment variable.

Environment values:
    - debug: parser and evaluator traces
    - info
    - warning (default)
    - error

Usage:
    from exprtree.core.environment import get_log_level

    logging.basicConfig(level=get_log_level().as_logging_level())
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class LogLevel(StrEnum):
    """Log levels accepted by EXPRTREE_LOG_LEVEL."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def as_logging_level(self) -> int:
        """Translate to the matching ``logging`` constant."""
        return logging.getLevelNamesMapping()[self.value.upper()]


# Default level
_DEFAULT_LEVEL = LogLevel.WARNING

# Environment variable name
EXPRTREE_LOG_LEVEL_VAR = "EXPRTREE_LOG_LEVEL"


def get_log_level() -> LogLevel:
    """Get the configured log level from EXPRTREE_LOG_LEVEL.

    Returns:
        LogLevel: The configured level. Defaults to warning if the variable
        is not set or holds an unknown value.

    Examples:
        >>> import os
        >>> os.environ["EXPRTREE_LOG_LEVEL"] = "debug"
        >>> get_log_level()
        <LogLevel.DEBUG: 'debug'>
    """
    env_value = os.environ.get(EXPRTREE_LOG_LEVEL_VAR, "").lower().strip()

    if env_value == "":
        return _DEFAULT_LEVEL
    if env_value == "warn":
        return LogLevel.WARNING
    try:
        return LogLevel(env_value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unknown EXPRTREE_LOG_LEVEL value '%s'. "
            "Valid values: debug, info, warning, error. Defaulting to warning.",
            env_value,
        )
        return _DEFAULT_LEVEL
