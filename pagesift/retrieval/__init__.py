"""
Relevance ranking module for PageSift.
"""

from .scorers import RelevanceScorer, StrictScorer, LenientScorer, prepare_query_words
from .ranker import RelevanceRanker, RankedResult, ScoredTier, LongestChunkTier

__all__ = [
    "RelevanceScorer",
    "StrictScorer",
    "LenientScorer",
    "prepare_query_words",
    "RelevanceRanker",
    "RankedResult",
    "ScoredTier",
    "LongestChunkTier",
]
