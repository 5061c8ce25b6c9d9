"""Tests for the logging sink."""

import logging

from anamericano_client.log import NULL_LOGGER, Logger, NullLogger, default_logger


def test_null_logger_discards(caplog):
    """NullLogger emits nothing."""
    caplog.set_level(logging.DEBUG)

    NULL_LOGGER.info("info")
    NULL_LOGGER.error("error")
    NULL_LOGGER.debug("debug")

    assert caplog.records == []


def test_null_logger_is_shared():
    """NULL_LOGGER is a NullLogger instance."""
    assert isinstance(NULL_LOGGER, NullLogger)


def test_stdlib_logger_satisfies_protocol():
    """A plain logging.Logger can be used as the sink."""
    logger: Logger = default_logger()

    assert logger is logging.getLogger("anamericano_client")
