"""
Search pipeline module for PageSift.
"""

from .models import SearchRequest, SearchOutcome, PENDING, PROCESSING, COMPLETED, FAILED
from .interfaces import StatusTracker, ResultSink
from .service import SearchPipeline, SearchService

__all__ = [
    "SearchRequest",
    "SearchOutcome",
    "StatusTracker",
    "ResultSink",
    "SearchPipeline",
    "SearchService",
    "PENDING",
    "PROCESSING",
    "COMPLETED",
    "FAILED",
]
