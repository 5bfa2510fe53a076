"""
Storage module for PageSift.
"""

from .database import DatabaseManager

__all__ = ["DatabaseManager"]
