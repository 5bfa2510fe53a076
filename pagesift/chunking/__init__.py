"""
Text chunking module for PageSift.
"""

from .models import Chunk, CONTENT_CONTEXTS
from .chunker import TextChunker, detect_content_context

__all__ = [
    "Chunk",
    "CONTENT_CONTEXTS",
    "TextChunker",
    "detect_content_context",
]
