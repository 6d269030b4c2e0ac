"""Package logger for ksubsets.

Everything logs under the ``ksubsets`` logger to stderr; stdout is reserved
for command output. The logger is quiet (WARNING) unless the CLI asks for
debug output.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "ksubsets"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(level: int = logging.WARNING, handler: Optional[logging.Handler] = None) -> None:
    """Attach one handler to the ``ksubsets`` logger; later calls are no-ops."""
    global _configured
    if _configured:
        return
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    setup_root_logger()
    return logging.getLogger(name)


def enable_debug_logging() -> None:
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in package_logger.handlers:
        handler.setLevel(logging.DEBUG)


def reset_logging() -> None:
    """Drop the handler so the next call configures from scratch (used by tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
