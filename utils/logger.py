# utils/logger.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Logging utility for parsing and truth table computation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for Proptab."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ProptabLogger:
    """Centralized logger for lexing, parsing and table building."""

    def __init__(self, name: str = "proptab", level: LogLevel = LogLevel.WARNING):
        """Initialize the Proptab logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ProptabFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for parsing and evaluation events
    def parse_started(self, raw: str, normalized: str):
        """Log the start of a parse with its normalized text."""
        self.debug(f"Parsing formula: {raw!r} (normalized: {normalized!r})")

    def tokens_lexed(self, text: str, tokens):
        """Log the token list produced for a (sub)formula."""
        rendered = ", ".join(f"{tok.type.name}:{tok.value}@{tok.index}" for tok in tokens)
        self.debug(f"  lexed {text!r} -> [{rendered}]")

    def split_selected(self, symbol: str, index: int, precedence: int, depth: int):
        """Log the connective chosen as split point."""
        self.debug(
            f"  split at '{symbol}' (token {index}, precedence {precedence}) depth={depth}"
        )

    def table_built(self, root: str, rows: int, columns: int):
        """Log a completed truth table."""
        self.debug(f"Truth table for {root}: {rows} rows x {columns} columns")

    def registry_changed(self, action: str, symbol: str):
        """Log a connective registry mutation."""
        self.debug(f"Registry {action}: '{symbol}'")


class ProptabFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ProptabLogger] = None


def get_logger(name: str = "proptab") -> ProptabLogger:
    """Get or create the global Proptab logger instance.

    Args:
        name: Logger name (default: "proptab")

    Returns:
        ProptabLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ProptabLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
