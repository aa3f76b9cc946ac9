"""Logging setup shared by graphwalk modules.

Every module logs through ``get_logger(__name__)``, a child of the package
logger ``graphwalk``, which owns the only handler. The algorithms log at
DEBUG only. Path enumeration logs from its producer thread, so the default
format names the thread.
"""

import logging
import sys
from typing import Dict, Optional

ROOT_LOGGER_NAME = "graphwalk"

DEFAULT_FORMAT = (
    "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
)

#: Loggers of the algorithm modules, by short name.
ALGORITHM_LOGGERS: Dict[str, str] = {
    "check_path": "graphwalk.algorithms.check_path",
    "all_paths": "graphwalk.algorithms.all_paths",
    "bellman_ford": "graphwalk.algorithms.bellman_ford",
}

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler of the ``graphwalk`` logger.

    Repeated calls are no-ops until ``reset_logging()``.

    Args:
        level: Package log level (default: INFO).
        format_string: Record format, defaults to ``DEFAULT_FORMAT``.
        handler: Destination, defaults to a stdout ``StreamHandler``.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the root logger
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name``, inheriting level and handler from ``graphwalk``."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphwalk`` logger and its handler."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging(*algorithms: str) -> None:
    """Emit DEBUG records for the whole package or for selected algorithms.

    Args:
        *algorithms: Short names from ``ALGORITHM_LOGGERS`` (for example
            ``"check_path"``). Without names the whole package logs at DEBUG.

    Raises:
        ValueError: If a name is not in ``ALGORITHM_LOGGERS``.
    """
    unknown = [name for name in algorithms if name not in ALGORITHM_LOGGERS]
    if unknown:
        raise ValueError(
            f"Unknown algorithm logger(s) {unknown}; "
            f"expected one of {sorted(ALGORITHM_LOGGERS)}."
        )

    if not algorithms:
        set_global_log_level(logging.DEBUG)
        return

    setup_root_logger()
    for name in algorithms:
        logging.getLogger(ALGORITHM_LOGGERS[name]).setLevel(logging.DEBUG)
    # The package level stays put; only the handler must pass DEBUG through
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        handler.setLevel(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every graphwalk logger to INFO."""
    for logger_name in ALGORITHM_LOGGERS.values():
        logging.getLogger(logger_name).setLevel(logging.NOTSET)
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler and all levels (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    for logger_name in ALGORITHM_LOGGERS.values():
        logging.getLogger(logger_name).setLevel(logging.NOTSET)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
