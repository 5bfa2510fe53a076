"""
Request and outcome models for the search pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..chunking.models import Chunk
from ..exceptions import InvalidRequestError
from ..utils.helpers import validate_url


PENDING = "pending"
PROCESSING = "processing"
COMPLETED = "completed"
FAILED = "failed"

SEARCH_STATUSES = (PENDING, PROCESSING, COMPLETED, FAILED)

# Allowed status changes; completed and failed are terminal
STATUS_TRANSITIONS = {
    PENDING: (PROCESSING,),
    PROCESSING: (COMPLETED, FAILED),
    COMPLETED: (),
    FAILED: (),
}


@dataclass(frozen=True)
class SearchRequest:
    """A single search: which page to read and what to look for."""
    website_url: str
    search_query: str
    max_results: int = 10
    max_tokens_per_chunk: int = 500

    def __post_init__(self):
        if not validate_url(self.website_url or ''):
            raise InvalidRequestError(f"Invalid website URL: {self.website_url!r}")
        if not self.search_query or not self.search_query.strip():
            raise InvalidRequestError("Search query cannot be empty")
        if self.max_results < 1:
            raise InvalidRequestError(f"max_results must be positive, got {self.max_results}")
        if self.max_tokens_per_chunk < 1:
            raise InvalidRequestError(
                f"max_tokens_per_chunk must be positive, got {self.max_tokens_per_chunk}")


@dataclass
class SearchOutcome:
    """Result of one pipeline run."""
    search_id: Optional[str] = None
    results_count: int = 0
    processing_time_ms: int = 0
    total_chunks: int = 0
    chunks: List[Chunk] = field(default_factory=list)
    tier: str = "none"
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error_message is None

    def to_dict(self) -> dict:
        return {
            'searchId': self.search_id,
            'success': self.success,
            'resultsCount': self.results_count,
            'processingTime': self.processing_time_ms,
            'totalChunks': self.total_chunks,
            'tier': self.tier,
            'chunks': [chunk.to_dict() for chunk in self.chunks],
            'error': self.error_message,
        }
