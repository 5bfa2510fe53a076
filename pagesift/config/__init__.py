"""
Configuration module for PageSift.
"""

from .settings import Config

__all__ = ["Config"]
