"""
Parse context for cross-cutting front-end options.

This module defines the ParseContext dataclass which holds options that
affect more than one stage of the MX front end (logging, diagnostics).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for the MX front end."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages
    DEBUG = 30      # Detailed diagnostic information


@dataclass
class ParseContext:
    """
    Holds cross-cutting options shared by the driver and its helpers.

    Attributes:
        log_rich_format:        If True, emit logs in rich format: timestamp and log level tag.
        log_level:              Current logging level.
    """
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'ParseContext':
        """Create a ParseContext with default settings."""
        return ParseContext(log_level=LogLevel.WARNING)
