"""
Page fetcher for PageSift.
"""

from dataclasses import dataclass
from typing import Optional

import requests

from ..config.settings import Config
from ..exceptions import FetchError
from ..utils.logging import get_logger


HTML_CONTENT_TYPES = ('text/html', 'application/xhtml+xml')


@dataclass
class RawContent:
    """Page content as returned by the fetch stage."""
    text: str
    content_type: str
    url: str
    source: str = "direct"

    def __len__(self) -> int:
        return len(self.text)


class PageFetcher:
    """Fetches a page's HTML, falling back to a reader service for thin pages."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """Initialize fetcher with configuration and a shared HTTP session."""
        self.config = config
        self.session = session or requests.Session()
        self.logger = get_logger(__name__)

        # Headers to make the fetcher look like a browser
        self.headers = {
            'User-Agent': config.user_agent,
            'Accept': config.accept_header,
        }

        self.reader_headers = {
            'User-Agent': config.reader_user_agent,
            'Accept': 'text/plain',
        }

    def fetch(self, url: str) -> RawContent:
        """Fetch a page, raising FetchError if it is unreachable or not HTML."""
        self.logger.info(f"Fetching content from: {url}")

        try:
            response = self.session.get(
                url,
                headers=self.headers,
                timeout=self.config.fetch_timeout,
                allow_redirects=True,
            )
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch website: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Failed to fetch website: {response.status_code} {response.reason or ''}".rstrip(),
                url=url,
                status_code=response.status_code,
            )

        content_type = response.headers.get('Content-Type', '')
        if not self._is_html(content_type):
            raise FetchError(
                f"Invalid content type: {content_type or 'unknown'}. Expected HTML content.",
                url=url,
                status_code=response.status_code,
            )

        raw = RawContent(text=response.text, content_type=content_type, url=response.url or url)
        self.logger.debug(f"Fetched {len(raw)} characters from {raw.url}")

        if self.config.enable_reader_fallback and self.is_thin_content(raw.text):
            self.logger.info(f"Content looks script-rendered ({len(raw)} chars), trying reader service")
            fallback = self._fetch_via_reader(url)
            if fallback is not None and len(fallback) > len(raw):
                self.logger.info(f"Reader service returned {len(fallback)} characters, using it")
                return fallback

        return raw

    def is_thin_content(self, text: str) -> bool:
        """Check whether a page body is too small or lacks a body element."""
        return len(text) < self.config.thin_content_threshold or '<body' not in text.lower()

    def _fetch_via_reader(self, url: str) -> Optional[RawContent]:
        """Retrieve a text rendering of the page from the reader service."""
        reader_url = f"{self.config.reader_url}{url}"

        try:
            response = self.session.get(
                reader_url,
                headers=self.reader_headers,
                timeout=self.config.reader_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.warning(f"Reader service failed for {url}: {e}")
            return None

        return RawContent(
            text=response.text,
            content_type=response.headers.get('Content-Type', 'text/plain'),
            url=url,
            source="reader",
        )

    @staticmethod
    def _is_html(content_type: str) -> bool:
        content_type = content_type.lower()
        return any(html_type in content_type for html_type in HTML_CONTENT_TYPES)
