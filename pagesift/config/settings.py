"""
Configuration management for PageSift.
"""

import os
from pathlib import Path
from typing import Optional


class Config:
   """Configuration settings for PageSift."""

   def __init__(self, data_dir: Optional[str] = None):
       """Initialize configuration with optional data directory."""
       # Base directories
       self.project_root = Path(__file__).parent.parent.parent
       self.data_dir = Path(data_dir) if data_dir else self.project_root / "data"
       self.data_dir.mkdir(parents=True, exist_ok=True)

       # Fetch settings
       self.fetch_timeout = float(os.getenv("PAGESIFT_FETCH_TIMEOUT", "15"))
       self.user_agent = os.getenv("PAGESIFT_USER_AGENT",
           "Mozilla/5.0 (compatible; WebSearch-Bot/1.0)")
       self.accept_header = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

       # Reader service fallback for script-rendered pages
       self.enable_reader_fallback = os.getenv("PAGESIFT_ENABLE_READER_FALLBACK", "true").lower() == "true"
       self.reader_url = os.getenv("PAGESIFT_READER_URL", "https://r.jina.ai/")
       self.reader_user_agent = os.getenv("PAGESIFT_READER_USER_AGENT", "PageSift-Reader/1.0")
       self.reader_timeout = float(os.getenv("PAGESIFT_READER_TIMEOUT", "30"))
       self.thin_content_threshold = int(os.getenv("PAGESIFT_THIN_CONTENT_THRESHOLD", "500"))

       # Markup reduction: "regex" (default) or "parser" (BeautifulSoup)
       self.reducer_mode = os.getenv("PAGESIFT_REDUCER_MODE", "regex").lower()

       # Search defaults
       self.default_max_results = int(os.getenv("PAGESIFT_DEFAULT_MAX_RESULTS", "10"))
       self.default_max_tokens = int(os.getenv("PAGESIFT_DEFAULT_MAX_TOKENS", "500"))

       # File paths
       self.db_file = self.data_dir / "pagesift.db"

       # Logging
       self.log_level = os.getenv("PAGESIFT_LOG_LEVEL", "INFO")
       self.log_file = self.data_dir / "pagesift.log"

   def to_dict(self) -> dict:
       """Public view of the configuration, used by the API and CLI."""
       return {
           'data_dir': str(self.data_dir),
           'fetch_timeout': self.fetch_timeout,
           'enable_reader_fallback': self.enable_reader_fallback,
           'reader_url': self.reader_url,
           'thin_content_threshold': self.thin_content_threshold,
           'reducer_mode': self.reducer_mode,
           'default_max_results': self.default_max_results,
           'default_max_tokens': self.default_max_tokens,
       }

   def __repr__(self):
       """String representation of config."""
       return f"Config(data_dir={self.data_dir}, reducer_mode={self.reducer_mode})"
