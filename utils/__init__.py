"""Utility modules for punch.

This package provides duration formatting and logging helpers.

Modules:
    time_utils: Duration decomposition and time formatting utilities
    logger: Logger setup with rotating log files
"""
from utils.time_utils import decompose, format_duration, format_instant, now_timestamp
from utils.logger import get_logger

__all__ = ["decompose", "format_duration", "format_instant", "now_timestamp", "get_logger"]
