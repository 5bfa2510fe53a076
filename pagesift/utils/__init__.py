"""
Utilities module for PageSift.
"""

from .logging import get_logger, setup_logging, LogCapture, log_performance
from .helpers import Timer, format_duration, truncate_text, validate_url

__all__ = [
   "get_logger",
   "setup_logging",
   "LogCapture",
   "log_performance",
   "Timer",
   "format_duration",
   "truncate_text",
   "validate_url",
]
