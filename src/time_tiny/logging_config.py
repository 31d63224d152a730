"""
Logging configuration for applications using time_tiny.

The package only creates module loggers; nothing is configured on import.
Applications (and the command line entry point) call ``setup_logging`` once
to attach a console handler to the root logger.
"""

import logging
import sys
import threading
from typing import Optional

from .config import ConfigurationError, env_bool, env_str

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TIME_TINY_LOG_LEVEL"
LOG_QUIET_ENV = "TIME_TINY_LOG_QUIET"
TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TECHNICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "time_tiny.console"


def _resolve_level(level: Optional[str]) -> int:
    name = level if level else env_str(LOG_LEVEL_ENV, or_value="INFO")
    resolved = logging.getLevelName(str(name).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_format(LOG_LEVEL_ENV, str(name), "a logging level name such as INFO")
    return resolved


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(TECHNICAL_FORMAT, TECHNICAL_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.set_name(_HANDLER_NAME)
    if user_friendly:
        console_handler.setLevel(logging.WARNING)
    return console_handler


def _has_console_handler(root_logger: logging.Logger) -> bool:
    return any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers)


def setup_logging(level: Optional[str] = None, user_friendly: Optional[bool] = None) -> None:
    """Configure root logging; repeated calls only adjust the level."""

    with _config_lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(_resolve_level(level))

        if _has_console_handler(root_logger):
            return

        if user_friendly is None:
            user_friendly = bool(env_bool(LOG_QUIET_ENV, or_value=False))
        root_logger.addHandler(_build_console_handler(user_friendly))
        _MODULE_LOGGER.debug("Console logging configured")


__all__ = ["setup_logging"]
