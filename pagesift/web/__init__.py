"""
HTTP API for PageSift.
"""

from .app import create_app

__all__ = ["create_app"]
