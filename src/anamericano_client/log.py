"""Logging sink used by the request executor.

Any object with ``info``/``error``/``debug`` methods taking a message works,
including a plain ``logging.Logger``. Pass ``NULL_LOGGER`` through
``ClientOptions.logger`` to silence the client entirely.
"""

import logging
from typing import Any, Protocol


class Logger(Protocol):
    """Logging capability injected through ``ClientOptions``."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class NullLogger:
    """Logger that discards all output.

    Example:
        logger = NullLogger()
        logger.info("This goes nowhere")  # No output
    """

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass


NULL_LOGGER = NullLogger()

DEFAULT_LOGGER_NAME = "anamericano_client"


def default_logger() -> logging.Logger:
    """Return the package's stdlib logger, used when no logger is configured."""
    return logging.getLogger(DEFAULT_LOGGER_NAME)
