"""Logging for the reflexion graph."""

import logging
import sys

LOGGER_NAME = "reflexion_model"


class ReflexionLogger:
    """
    Thin wrapper over the ``reflexion_model`` stdlib logger.

    Messages use %-style arguments so debug output for every insert costs
    nothing when debug logging is off.
    """

    def __init__(self, name: str = LOGGER_NAME, level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_level(level))

        # Avoid duplicate handlers
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(handler)

    def debug(self, message: str, *args):
        self.logger.debug(message, *args)

    def info(self, message: str, *args):
        self.logger.info(message, *args)

    def warning(self, message: str, *args):
        self.logger.warning(message, *args)

    def rejected(self, operation: str, error: Exception):
        """Log an insert or lookup refused with ``error``."""
        self.logger.warning("%s rejected: %s", operation, error)


def _level(level: str) -> int:
    return getattr(logging, level.upper())


# Global logger instance
_logger = ReflexionLogger()


def get_logger() -> ReflexionLogger:
    """Get the global logger instance."""
    return _logger


def set_log_level(level: str):
    """Set the global log level, e.g. from ``ReflexionGraphConfig.log_level``."""
    _logger.logger.setLevel(_level(level))
