"""
Logging setup with Rich integration.

This module provides:
- A single RichHandler on the root logger, configured once
- Classic and minimal log modes with verbose/quiet level control
- Structured loggers with operation context and timing
"""

import logging
import os
import threading
import time
from contextlib import contextmanager
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .rich_cli import URICRAFT_THEME


class LogMode(str, Enum):
    """Logging output modes."""

    CLASSIC = "classic"
    MINIMAL = "minimal"


class StructuredLogger:
    """Logger wrapper adding operation context to messages."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        # Rely on the root RichHandler
        self.logger.handlers = []
        self.logger.propagate = True
        self._operation_context: dict[str, Any] = {}

    @contextmanager
    def operation_context(self, operation: str, **context: Any):
        """Log start, completion or failure (with duration) of an operation."""
        if not operation or not isinstance(operation, str):
            raise ValueError("Operation name must be a non-empty string")

        start_time = time.time()
        previous = self._operation_context
        self._operation_context = {"operation": operation, **context}
        self.debug(f"Starting {operation}")

        try:
            yield self
        except Exception as e:
            duration = time.time() - start_time
            # The caller reports the error; keep the timing for verbose runs
            self.debug(f"{operation} failed after {duration:.2f}s: {e}")
            raise
        else:
            duration = time.time() - start_time
            self.debug(f"{operation} completed in {duration:.3f}s")
        finally:
            self._operation_context = previous

    def _format(self, message: str) -> str:
        if not self._operation_context:
            return message
        details = ", ".join(
            f"{k}={v}" for k, v in self._operation_context.items() if k != "operation"
        )
        return f"{message} ({details})" if details else message

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(self._format(message), **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(self._format(message), **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(self._format(message), **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(self._format(message), **kwargs)


class LoggerManager:
    """Manager for creating and configuring structured loggers."""

    _loggers: dict[str, StructuredLogger] = {}
    _console: Console | None = None
    _handler: RichHandler | None = None
    log_mode: LogMode = LogMode.CLASSIC
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_global_logging(
        cls, console: Console | None = None, level: int = logging.INFO
    ) -> None:
        """Install the RichHandler on the root logger (idempotent)."""
        with cls._setup_lock:
            root_logger = logging.getLogger()
            if cls._handler is not None and cls._handler in root_logger.handlers:
                root_logger.setLevel(level)
                return

            # Replace foreign RichHandlers, keep other handlers
            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            cls._console = console or Console(theme=URICRAFT_THEME, stderr=True)
            cls._handler = RichHandler(
                console=cls._console,
                show_time=False,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            cls._handler.setFormatter(logging.Formatter(fmt="%(message)s"))
            root_logger.addHandler(cls._handler)
            root_logger.setLevel(level)

    @classmethod
    def set_log_mode(
        cls, mode: LogMode, verbose: bool = False, quiet: bool = False
    ) -> int:
        """Configure log mode and root level; returns the level applied."""
        cls.log_mode = mode
        # quiet > verbose > default
        if quiet or os.getenv("URICRAFT_QUIET", "").lower() in {"1", "true", "yes"}:
            level = logging.WARNING
        elif verbose:
            level = logging.DEBUG
        else:
            level = logging.WARNING if mode == LogMode.MINIMAL else logging.INFO

        logging.getLogger().setLevel(level)
        return level

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        return cls._loggers.setdefault(name, StructuredLogger(name))

    @classmethod
    def reset(cls) -> None:
        """Remove the installed handler (used by tests)."""
        with cls._setup_lock:
            if cls._handler is not None:
                logging.getLogger().removeHandler(cls._handler)
            cls._handler = None
            cls._console = None
            cls._loggers.clear()
            cls.log_mode = LogMode.CLASSIC


def setup_enhanced_logging(
    console: Console | None = None, level: int = logging.INFO
) -> StructuredLogger:
    """Set up logging and return the main CLI logger."""
    LoggerManager.setup_global_logging(console, level)
    return LoggerManager.get_logger("uricraft.main")


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger by name."""
    return LoggerManager.get_logger(name)
