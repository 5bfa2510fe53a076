"""
Data models for chunking module.
"""

from dataclasses import dataclass, asdict


FOOTER = "footer"
NAVIGATION = "navigation"
HEADING = "heading"
CONTACT = "contact"
CONTENT = "content"

CONTENT_CONTEXTS = (FOOTER, NAVIGATION, HEADING, CONTACT, CONTENT)


@dataclass
class Chunk:
    """Represents a bounded-size fragment of a page's text."""
    content: str
    estimated_tokens: int
    chunk_index: int
    content_context: str = CONTENT
    relevance_score: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
