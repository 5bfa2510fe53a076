"""
Helper utilities for PageSift.
"""

import re
import time


def format_duration(seconds: float) -> str:
   """Format duration in seconds as human-readable string."""
   if seconds < 1:
       return f"{seconds*1000:.0f}ms"
   elif seconds < 60:
       return f"{seconds:.1f}s"
   elif seconds < 3600:
       minutes = int(seconds // 60)
       secs = int(seconds % 60)
       return f"{minutes}m {secs}s"
   else:
       hours = int(seconds // 3600)
       minutes = int((seconds % 3600) // 60)
       return f"{hours}h {minutes}m"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
   """Truncate text to specified length with optional suffix."""
   if len(text) <= max_length:
       return text

   if len(suffix) >= max_length:
       return text[:max_length]

   return text[:max_length - len(suffix)] + suffix


def validate_url(url: str) -> bool:
   """Validate if string is an absolute http(s) URL."""
   if not url:
       return False

   url_pattern = re.compile(
       r'^https?://'  # http:// or https://
       r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,63}\.?|'  # domain...
       r'localhost|'  # localhost...
       r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # ...or ip
       r'(?::\d+)?'  # optional port
       r'(?:/?|[/?#]\S+)$', re.IGNORECASE)

   return url_pattern.match(url) is not None


class Timer:
   """Simple timer context manager."""

   def __init__(self, name: str = "Operation"):
       """Initialize timer with optional name."""
       self.name = name
       self.start_time = None
       self.end_time = None

   def __enter__(self):
       """Start timing."""
       self.start_time = time.perf_counter()
       return self

   def __exit__(self, exc_type, exc_val, exc_tb):
       """Stop timing."""
       self.end_time = time.perf_counter()

   @property
   def elapsed(self) -> float:
       """Get elapsed time in seconds."""
       if self.start_time is None:
           return 0.0

       end = self.end_time if self.end_time else time.perf_counter()
       return end - self.start_time

   @property
   def elapsed_ms(self) -> int:
       """Elapsed time rounded to whole milliseconds."""
       return int(round(self.elapsed * 1000))

   def __str__(self) -> str:
       """String representation of timer."""
       return f"{self.name}: {format_duration(self.elapsed)}"
