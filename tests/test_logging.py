"""Tests for :mod:`ksubsets.logging`."""

import logging

from ksubsets import logging as ks_logging


def test_get_logger_inherits_package_level() -> None:
    logger = ks_logging.get_logger("ksubsets.engine.verify")
    package_logger = logging.getLogger(ks_logging.ROOT_LOGGER_NAME)
    assert logger.getEffectiveLevel() == logging.WARNING
    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1


def test_setup_is_idempotent() -> None:
    ks_logging.setup_root_logger()
    ks_logging.setup_root_logger()
    assert len(logging.getLogger(ks_logging.ROOT_LOGGER_NAME).handlers) == 1


def test_enable_debug_logging() -> None:
    ks_logging.enable_debug_logging()
    package_logger = logging.getLogger(ks_logging.ROOT_LOGGER_NAME)
    assert package_logger.level == logging.DEBUG
    assert all(handler.level == logging.DEBUG for handler in package_logger.handlers)


def test_reset_drops_handler() -> None:
    ks_logging.setup_root_logger()
    ks_logging.reset_logging()
    assert logging.getLogger(ks_logging.ROOT_LOGGER_NAME).handlers == []
