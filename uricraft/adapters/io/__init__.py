"""IO adapters: logging setup and rich console rendering."""

from .enhanced_logging import (
    LoggerManager,
    LogMode,
    StructuredLogger,
    get_logger,
    setup_enhanced_logging,
)
from .rich_cli import URICRAFT_THEME, RichCliComponents, make_console

__all__ = [
    "LoggerManager",
    "LogMode",
    "StructuredLogger",
    "get_logger",
    "setup_enhanced_logging",
    "URICRAFT_THEME",
    "RichCliComponents",
    "make_console",
]
