"""
Logging utilities for the MX front end.

This module provides logging functions that respect the ParseContext
settings (log level and rich format).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time
from typing import Optional

from mx_context import ParseContext, LogLevel


def log(context: ParseContext, log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's logging level admits it.

    Args:
        context:    The parse context containing the logging level.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        print("No context provided for logging.", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: ParseContext, message: str) -> None:
    log(context, LogLevel.ERROR, message)


def log_warning(context: ParseContext, message: str) -> None:
    log(context, LogLevel.WARNING, message)


def log_info(context: ParseContext, message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: ParseContext, message: str) -> None:
    """
    Log a debug-level message if logging level is DEBUG.

    Args:
        context: The parse context containing the logging level.
        message: The message to log.
    """
    log(context, LogLevel.DEBUG, message)


def log_stage(context: ParseContext, stage: str, source_name: Optional[str] = None) -> None:
    """
    Log the start of a front-end stage.

    Args:
        context: The parse context containing logging flags.
        stage: The name of the stage (e.g., "Parsing").
        source_name: Optional name of the input being processed.
    """
    if source_name:
        log(context, LogLevel.INFO, f"{stage} '{source_name}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
