"""
Content acquisition module for PageSift.
"""

from .page_fetcher import PageFetcher, RawContent
from .markup_reducer import MarkupReducer, reduce_markup

__all__ = ["PageFetcher", "RawContent", "MarkupReducer", "reduce_markup"]
