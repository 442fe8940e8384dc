#!/usr/bin/env python3
"""Debug logging for glob compilation and set construction.

A thin layer over the stdlib ``fileglob`` logger that renders key-value
context as ``message | key=value ...``. The default level is WARNING, so
compiling and matching globs is silent unless a caller lowers it.

Example:
    >>> get_logger().set_level("DEBUG")
    >>> FileGlob("*.js")  # logs "Compiled glob | glob=*.js regex=..."
"""

import logging
from enum import IntEnum
from typing import Any, List, Optional, Union


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class Logger:
    """Wrapper around a stdlib logger with key-value context."""

    def __init__(
        self,
        name: str = "fileglob",
        level: Union[LogLevel, str] = LogLevel.WARNING,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        Args:
            name: Logger name for identification
            level: Minimum log level to output
            handlers: Optional list of logging handlers
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(level)

        if handlers is None:
            handlers = [self._create_console_handler()]

        self.logger.handlers.clear()
        for handler in handlers:
            self.logger.addHandler(handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def _create_console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        return handler

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the minimum log level (LogLevel or level name)."""
        if isinstance(level, str):
            level = LogLevel[level.upper()]
        self.logger.setLevel(level)

    def debug(self, msg: str, **context: Any) -> None:
        """Log a debug message with key-value context."""
        if self.logger.isEnabledFor(logging.DEBUG):
            if context:
                msg = f"{msg} | " + " ".join(f"{k}={v}" for k, v in context.items())
            self.logger.debug(msg, extra={"context": context})


# Global logger instance
_global_logger: Optional[Logger] = None


def get_logger(name: str = "fileglob") -> Logger:
    """Get or create a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    global _global_logger
    if _global_logger is None or _global_logger.name != name:
        _global_logger = Logger(name=name)
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance."""
    global _global_logger
    _global_logger = logger
