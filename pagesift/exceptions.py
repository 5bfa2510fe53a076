"""
Exception types raised by PageSift.
"""

from typing import Optional


class PageSiftError(Exception):
    """Base class for PageSift errors."""
    pass


class FetchError(PageSiftError):
    """Raised when a page cannot be retrieved as HTML."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InvalidRequestError(PageSiftError, ValueError):
    """Raised for a malformed search request."""
    pass


class StatusTransitionError(PageSiftError):
    """Raised when a search status change skips or reverses a step."""
    pass
