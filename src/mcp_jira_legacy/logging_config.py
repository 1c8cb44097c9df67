"""Logging configuration for MCP Jira legacy.

Every record written by the configured handlers carries a ``context``
field such as ``operation=search_jira_issues,trace_id=1a2b3c4d``. The
context lives in a ``ContextVar`` so concurrent tool calls on the event
loop each see their own operation, and it is attached by a handler
filter so plain ``logging.getLogger(...)`` loggers get it too.
"""

import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Iterable
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

DEFAULT_LOGGER_NAME = "mcp-jira-legacy"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"

_log_context: ContextVar[dict[str, Any]] = ContextVar("mcp_jira_legacy_log_context")


def get_log_context() -> dict[str, Any]:
    """Return a copy of the context of the current operation."""
    return dict(_log_context.get({}))


def format_log_context(context: dict[str, Any]) -> str:
    """Render a context as ``key=value`` pairs, or ``no-context`` when empty."""
    if not context:
        return NO_CONTEXT
    return ",".join(f"{key}={value}" for key, value in context.items())


class ContextFilter(logging.Filter):
    """Attaches the current operation context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_log_context(_log_context.get({}))
        return True


class LoggingContextManager:
    """Context manager that scopes log records to one named operation.

    Entering logs the start and pushes ``operation`` and ``trace_id`` (plus
    any extra values) on top of the enclosing context. Leaving logs the
    duration, or the failure, and restores the enclosing context.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        self.logger = logger
        self.operation = operation
        self.trace_id = str(context.pop("trace_id", None) or uuid.uuid4().hex[:8])
        self.context = context
        self.start_time = 0.0
        self._token: Token[dict[str, Any]] | None = None

    def __enter__(self) -> "LoggingContextManager":
        scoped = {
            **get_log_context(),
            **self.context,
            "operation": self.operation,
            "trace_id": self.trace_id,
        }
        self._token = _log_context.set(scoped)
        self.start_time = time.monotonic()
        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.monotonic() - self.start_time
        try:
            if exc_type:
                self.logger.error(
                    f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
                )
            else:
                self.logger.debug(
                    f"Operation completed: {self.operation} in {duration:.3f}s"
                )
        finally:
            if self._token is not None:
                _log_context.reset(self._token)
                self._token = None


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """
    Configure the handlers of one logger hierarchy.

    Console output goes to stderr because stdout carries the stdio
    transport. Calling this again for the same name replaces the previous
    handlers. Loggers named in ``extra_loggers`` get the same level and
    handlers, so their records land in the same file.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.); falls back to ``LOG_LEVEL``
        log_to_file: If True, also write to a rotating file
        log_dir: Directory for the log file; falls back to ``LOG_DIR``
        log_format: Format string; falls back to ``LOG_FORMAT``
        extra_loggers: Other logger hierarchies that share these handlers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    shared = [logging.getLogger(extra) for extra in extra_loggers]

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    for target in [logger, *shared]:
        target.setLevel(numeric_level)
        for handler in target.handlers[:]:
            target.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_to_file:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_directory / f"{name}.log",
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ContextFilter())

    for target in [logger, *shared]:
        for handler in handlers:
            target.addHandler(handler)
        # Keeps records off the root logger so nothing reaches stdout
        target.propagate = False

    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Create a context manager for operation logging.

    Args:
        logger: Logger used for the start and end records
        operation: Name of the operation
        **context: Additional context values; ``trace_id`` is generated when absent

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
