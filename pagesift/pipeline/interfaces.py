"""
Collaborator interfaces used by the search service.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..chunking.models import Chunk


class StatusTracker(ABC):
    """Records the lifecycle of a search: pending, processing, then completed or failed."""

    @abstractmethod
    def update_status(self, search_id: str, status: str,
                      processing_time_ms: Optional[int] = None,
                      results_count: Optional[int] = None,
                      error_message: Optional[str] = None,
                      total_chunks: Optional[int] = None) -> None:
        """Move a search to a new status."""
        pass


class ResultSink(ABC):
    """Stores the ranked chunks of a search."""

    @abstractmethod
    def save_results(self, search_id: str, chunks: List[Chunk], total_chunks: int) -> None:
        """Persist ranked chunks in order."""
        pass
