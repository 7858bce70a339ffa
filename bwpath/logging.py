"""Logging for bwpath: one ``bwpath`` root logger, level taken from config."""

import logging
import sys
from typing import Optional, Union

from bwpath.config import SOLVER_CONFIG

LogLevel = Union[int, str]

_ROOT_NAME = "bwpath"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def resolve_level(level: LogLevel) -> int:
    """Turn ``logging.DEBUG``, ``"debug"`` or ``"10"`` into a numeric level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    name = level.strip()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level {level!r}.")
    return numeric


def setup_root_logger(
    level: Optional[LogLevel] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``bwpath`` logger.

    Calling it again after the first successful call is a no-op.

    Args:
        level: Logging level or level name. Defaults to
            ``SOLVER_CONFIG.log_level`` (``BWPATH_LOG_LEVEL``); an unknown
            name there falls back to INFO with a warning.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).

    Raises:
        ValueError: If an explicit level name is unknown.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    bad_config_level = None
    if level is None:
        try:
            numeric = resolve_level(SOLVER_CONFIG.log_level)
        except ValueError:
            bad_config_level = SOLVER_CONFIG.log_level
            numeric = logging.INFO
    else:
        numeric = resolve_level(level)

    root_logger = logging.getLogger(_ROOT_NAME)
    root_logger.setLevel(numeric)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True

    if bad_config_level is not None:
        root_logger.warning(
            "Ignoring unknown BWPATH_LOG_LEVEL %r, using INFO", bad_config_level
        )


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the bwpath root configuration.

    Args:
        name: Logger name (typically __name__ from calling module).
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: LogLevel) -> None:
    """Change the level of the bwpath logger and its handlers at runtime.

    Args:
        level: Logging level or level name, e.g. ``logging.DEBUG`` or ``"debug"``.
    """
    setup_root_logger()

    numeric = resolve_level(level)
    root_logger = logging.getLogger(_ROOT_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def reset_logging() -> None:
    """Drop the bwpath handler so the next setup starts fresh (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
