#!/usr/bin/env python3
"""Structured logging for fileignore.

Messages carry key-value context that is appended to the text:

    Loaded ignore file | path=/repo/.fileignore rules=4

Context can be attached per call or for a block via ``add_context``; the
context stack is thread-local.

Example:
    >>> logger = get_logger()
    >>> with logger.add_context(ignore_file=".fileignore"):
    ...     logger.debug("Compiling rules", lines=12)
"""

import logging
import logging.handlers
import threading
from contextlib import contextmanager
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

LOGGER_NAME = "fileignore"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG  # 10
    INFO = logging.INFO  # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR  # 40
    CRITICAL = logging.CRITICAL  # 50

    @classmethod
    def parse(cls, level: Union["LogLevel", int, str]) -> "LogLevel":
        """Convert a level name or number into a LogLevel."""
        if isinstance(level, str):
            return cls[level.upper()]
        return cls(level)


class Logger:
    """Structured logger with context support.

    Wraps a standard library logger. Handlers are replaced on construction
    and propagation to the root logger is disabled.
    """

    _context_stack = threading.local()

    def __init__(
        self,
        name: str = LOGGER_NAME,
        level: Union[LogLevel, str] = LogLevel.WARNING,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        Args:
            name: Logger name for identification
            level: Minimum log level to output
            handlers: Optional list of logging handlers (default: stderr)
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(level)

        if handlers is None:
            handlers = [self._create_console_handler()]

        self.logger.handlers.clear()
        for handler in handlers:
            self.logger.addHandler(handler)

        self.logger.propagate = False

    def _create_console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def create_file_handler(
        self,
        filename: Union[str, Path],
        max_bytes: int = 1024 * 1024,  # 1MB
        backup_count: int = 3,
    ) -> logging.handlers.RotatingFileHandler:
        """Create rotating file handler.

        Args:
            filename: Path to log file
            max_bytes: Maximum size before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured rotating file handler
        """
        handler = logging.handlers.RotatingFileHandler(
            filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def add_handler(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)

    def remove_handler(self, handler: logging.Handler) -> None:
        self.logger.removeHandler(handler)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the minimum log level.

        Args:
            level: New log level (LogLevel or name such as "debug")
        """
        self.logger.setLevel(LogLevel.parse(level))

    def get_level(self) -> LogLevel:
        return LogLevel(self.logger.level)

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        return self.logger.isEnabledFor(LogLevel.parse(level))

    def _get_context(self) -> Dict[str, Any]:
        """Merge the thread-local context stack, innermost last."""
        if not hasattr(self._context_stack, "stack"):
            self._context_stack.stack = [{}]

        context: Dict[str, Any] = {}
        for ctx in self._context_stack.stack:
            context.update(ctx)
        return context

    @staticmethod
    def _format_message(msg: str, context: Dict[str, Any]) -> str:
        if context:
            ctx_str = " ".join(f"{k}={v}" for k, v in context.items())
            return f"{msg} | {ctx_str}"
        return msg

    @contextmanager
    def add_context(self, **kwargs: Any) -> Iterator[None]:
        """Attach context to every message logged inside the block.

        Args:
            **kwargs: Key-value pairs to add to context
        """
        if not hasattr(self._context_stack, "stack"):
            self._context_stack.stack = [{}]

        self._context_stack.stack.append(kwargs)
        try:
            yield
        finally:
            self._context_stack.stack.pop()

    def _log(self, level: LogLevel, msg: str, context: Dict[str, Any], exc_info: Any = None) -> None:
        if not self.logger.isEnabledFor(level):
            return
        combined = self._get_context()
        combined.update(context)
        self.logger.log(
            level,
            self._format_message(msg, combined),
            exc_info=exc_info,
            extra={"context": combined},
        )

    def debug(self, msg: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, msg, context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(LogLevel.INFO, msg, context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(LogLevel.WARNING, msg, context)

    def error(self, msg: str, **context: Any) -> None:
        self._log(LogLevel.ERROR, msg, context)

    def exception(self, msg: str, exc: BaseException, **context: Any) -> None:
        """Log an error with traceback.

        Args:
            msg: Log message
            exc: Exception to log
            **context: Additional context key-value pairs
        """
        context["exception_type"] = type(exc).__name__
        context["exception_message"] = str(exc)
        self._log(LogLevel.ERROR, msg, context, exc_info=exc)


# Global logger instance
_global_logger: Optional[Logger] = None


def get_logger(name: str = LOGGER_NAME) -> Logger:
    """Get or create the global logger.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    global _global_logger
    if _global_logger is None or _global_logger.name != name:
        _global_logger = Logger(name=name)
    return _global_logger


def set_global_logger(logger: Optional[Logger]) -> None:
    """Set (or reset, with None) the global logger instance."""
    global _global_logger
    _global_logger = logger


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> Logger:
    """Create the global logger from configuration values.

    Args:
        level: Minimum log level
        log_file: Optional file to log to in addition to stderr

    Returns:
        The new global logger
    """
    logger = Logger(name=LOGGER_NAME, level=level)
    if log_file:
        logger.add_handler(logger.create_file_handler(log_file))
    set_global_logger(logger)
    return logger
