"""
Logging utilities for PageSift.
"""

import logging
import sys
import time
from functools import wraps
from pathlib import Path
from typing import List, Optional

from .helpers import format_duration


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# HTTP client and server internals are only interesting when they fail
NOISY_LOGGERS = ('urllib3', 'requests', 'werkzeug')

# Marks handlers installed by setup_logging so a second call can replace them
_PAGESIFT_HANDLER = '_pagesift_handler'


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
   handler.setLevel(level)
   handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
   setattr(handler, _PAGESIFT_HANDLER, True)
   return handler


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None,
                enable_console: bool = True) -> None:
   """Setup logging for the CLI and the HTTP API.

   Console output goes to stderr so search results printed on stdout stay
   clean. Calling this again replaces the handlers from the previous call and
   leaves any other handlers on the root logger alone.
   """
   numeric_level = getattr(logging, log_level.upper(), logging.INFO)

   root_logger = logging.getLogger()
   root_logger.setLevel(numeric_level)

   for handler in list(root_logger.handlers):
       if getattr(handler, _PAGESIFT_HANDLER, False):
           root_logger.removeHandler(handler)
           handler.close()

   if enable_console:
       root_logger.addHandler(_build_handler(logging.StreamHandler(sys.stderr), numeric_level))

   if log_file:
       log_path = Path(log_file)
       log_path.parent.mkdir(parents=True, exist_ok=True)
       root_logger.addHandler(_build_handler(logging.FileHandler(log_path, encoding='utf-8'), numeric_level))

   for name in NOISY_LOGGERS:
       logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
   """Get a logger instance for the given name."""
   return logging.getLogger(name)


class LogCapture:
   """Collects records from one logger, for assertions in tests.

   The logger's level is lowered to ``level`` while capturing if needed, and
   restored afterwards.
   """

   def __init__(self, logger_name: str = 'pagesift', level: int = logging.INFO):
       self.logger_name = logger_name
       self.level = level
       self.records: List[logging.LogRecord] = []
       self._handler = None
       self._previous_level = None

   def __enter__(self):
       logger = logging.getLogger(self.logger_name)

       self._handler = logging.Handler(self.level)
       self._handler.emit = self.records.append
       logger.addHandler(self._handler)

       self._previous_level = logger.level
       if logger.getEffectiveLevel() > self.level:
           logger.setLevel(self.level)

       return self

   def __exit__(self, exc_type, exc_val, exc_tb):
       logger = logging.getLogger(self.logger_name)
       logger.removeHandler(self._handler)
       logger.setLevel(self._previous_level)

   def get_messages(self, level: Optional[int] = None) -> List[str]:
       """Captured messages, optionally only those at or above ``level``."""
       return [record.getMessage() for record in self.records
               if level is None or record.levelno >= level]


def log_performance(func):
   """Log how long each call of a pipeline stage takes, including failed calls."""

   @wraps(func)
   def wrapper(*args, **kwargs):
       logger = get_logger(func.__module__)
       start_time = time.perf_counter()

       try:
           result = func(*args, **kwargs)
       except Exception as e:
           elapsed = format_duration(time.perf_counter() - start_time)
           logger.warning(f"{func.__qualname__} failed after {elapsed}: {e}")
           raise

       logger.debug(f"{func.__qualname__} completed in {format_duration(time.perf_counter() - start_time)}")
       return result

   return wrapper
