# File: src/mstair/envelope/xlogging/logger_factory.py
"""
Logger factory for EnvelopeLogger instances.

Loggers are created through logging.getLogger() so they keep their place in the
logging hierarchy (parents, propagation, caplog). Their initial level comes from
LogLevelConfig; with no matching entry it stays NOTSET and follows its ancestors.
The library never attaches handlers, host applications own output.
"""

from __future__ import annotations

import logging
from typing import Any

from mstair.envelope.xlogging.logger_constants import TRACE, initialize_logger_constants
from mstair.envelope.xlogging.logger_util import LogLevelConfig


__all__ = [
    "EnvelopeLogger",
    "create_logger",
]


class EnvelopeLogger(logging.Logger):
    """logging.Logger with a TRACE level and environment-resolved initial level."""

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        initialize_logger_constants()
        if level in (logging.NOTSET, "NOTSET", ""):
            # NOTSET unless configured, so the level set on an ancestor applies.
            level = LogLevelConfig.get_instance().get_effective_level(name, default=logging.NOTSET)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{self.__class__.__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        if self.isEnabledFor(TRACE):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE, msg, args, **kwargs)


def create_logger(name: str, *, level: int | str | None = None) -> EnvelopeLogger:
    """
    Return the EnvelopeLogger registered under `name`, creating it if needed.

    :param name: Logger name, normally the caller's __name__.
    :param level: Explicit level; overrides the environment-resolved level.
    :return: EnvelopeLogger instance.
    :raises TypeError: If a plain logging.Logger already owns the name.
    """
    logging_class = logging.getLoggerClass()
    logging.setLoggerClass(EnvelopeLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging_class)
    if not isinstance(logger, EnvelopeLogger):
        raise TypeError(f"Failed to create EnvelopeLogger: {logger!r}")
    if level is not None:
        logger.setLevel(level)
    return logger


# End of file: src/mstair/envelope/xlogging/logger_factory.py
