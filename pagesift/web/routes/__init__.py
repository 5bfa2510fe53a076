"""
Route blueprints for the PageSift HTTP API.
"""

from .search import search_bp
from .api import api_bp

__all__ = ["search_bp", "api_bp"]
