# utils/__init__.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    ProptabLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "ProptabLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
