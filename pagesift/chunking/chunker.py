"""
Text chunker for PageSift.
"""

import math
from typing import List, Dict, Optional

from ..config.settings import Config
from ..utils.logging import get_logger
from .models import Chunk, CONTENT_CONTEXTS, FOOTER, NAVIGATION, HEADING, CONTACT, CONTENT


# Rough estimate for English prose
WORDS_PER_TOKEN = 0.75
CHARS_PER_TOKEN = 4


def detect_content_context(content: str) -> str:
    """Guess which page region a chunk of text came from."""
    lower_content = content.lower()

    if '©' in lower_content or 'copyright' in lower_content:
        return FOOTER
    if 'navigation' in lower_content or 'menu' in lower_content:
        return NAVIGATION
    if len(lower_content) < 100:
        return HEADING
    if any(word in lower_content for word in ('contact', 'email', 'phone')):
        return CONTACT

    return CONTENT


class TextChunker:
    """Splits plain text into fixed-size word groups."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize text chunker with optional configuration."""
        self.config = config
        self.logger = get_logger(__name__)

    def chunk(self, text: str, max_tokens_per_chunk: Optional[int] = None) -> List[Chunk]:
        """Split text into chunks of at most max_tokens_per_chunk estimated tokens."""
        if max_tokens_per_chunk is None:
            max_tokens_per_chunk = self.config.default_max_tokens if self.config else 500
        if max_tokens_per_chunk < 1:
            raise ValueError(f"max_tokens_per_chunk must be positive, got {max_tokens_per_chunk}")

        words = text.split() if text else []
        if not words:
            self.logger.debug("No words to chunk")
            return []

        words_per_chunk = max(1, math.floor(max_tokens_per_chunk * WORDS_PER_TOKEN))
        self.logger.debug(f"Chunking {len(words)} words into groups of {words_per_chunk}")

        chunks = []
        for start in range(0, len(words), words_per_chunk):
            content = ' '.join(words[start:start + words_per_chunk])
            if not content:
                continue

            estimated_tokens = math.ceil(len(content) / CHARS_PER_TOKEN)
            chunks.append(Chunk(
                content=content,
                estimated_tokens=min(estimated_tokens, max_tokens_per_chunk),
                chunk_index=len(chunks) + 1,
                content_context=detect_content_context(content),
            ))

        self.logger.info(f"Created {len(chunks)} chunks")
        return chunks

    def get_stats(self, chunks: List[Chunk]) -> Dict[str, int]:
        """Get chunk counts per content context."""
        stats = {context: 0 for context in CONTENT_CONTEXTS}
        for chunk in chunks:
            stats[chunk.content_context] = stats.get(chunk.content_context, 0) + 1
        stats['total'] = len(chunks)
        return stats
