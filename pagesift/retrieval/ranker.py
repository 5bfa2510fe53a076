"""
Relevance ranker with tiered fallback selection.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..chunking.models import Chunk
from ..utils.logging import get_logger
from .scorers import RelevanceScorer, StrictScorer, LenientScorer, prepare_query_words


BEST_EFFORT_LIMIT = 3
BEST_EFFORT_SCORE = 0.1


@dataclass
class RankedResult:
    """Chunks selected for a query, best first."""
    chunks: List[Chunk] = field(default_factory=list)
    tier: str = "none"

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __getitem__(self, index):
        return self.chunks[index]


class ScoredTier:
    """Selects chunks that a scorer rates above zero."""

    def __init__(self, scorer: RelevanceScorer):
        self.scorer = scorer
        self.name = scorer.name

    def select(self, chunks: Sequence[Chunk], query_words: List[str], max_results: int) -> List[Chunk]:
        for chunk in chunks:
            chunk.relevance_score = self.scorer.score(chunk.content, query_words)

        matched = [chunk for chunk in chunks if chunk.relevance_score > 0]
        # Equal scores keep document order
        matched = sorted(matched, key=lambda chunk: (-chunk.relevance_score, chunk.chunk_index))
        return matched[:max_results]


class LongestChunkTier:
    """Best-effort selection of the longest chunks with a nominal score."""

    name = "longest"

    def __init__(self, limit: int = BEST_EFFORT_LIMIT, score: float = BEST_EFFORT_SCORE):
        self.limit = limit
        self.score = score

    def select(self, chunks: Sequence[Chunk], query_words: List[str], max_results: int) -> List[Chunk]:
        longest = sorted(chunks, key=lambda chunk: (-len(chunk.content), chunk.chunk_index))
        selected = longest[:min(max_results, self.limit)]
        for chunk in selected:
            chunk.relevance_score = self.score
        return selected


class RelevanceRanker:
    """Ranks chunks against a query, trying each tier until one selects something."""

    def __init__(self, tiers: Optional[list] = None):
        """Initialize ranker with an ordered list of selection tiers."""
        self.logger = get_logger(__name__)
        self.tiers = tiers if tiers is not None else [
            ScoredTier(StrictScorer()),
            ScoredTier(LenientScorer()),
            LongestChunkTier(),
        ]

    def rank(self, chunks: Sequence[Chunk], query: str, max_results: int = 10) -> RankedResult:
        """Return at most max_results chunks ordered by descending relevance."""
        if max_results < 1:
            raise ValueError(f"max_results must be positive, got {max_results}")

        if not chunks:
            self.logger.debug("No chunks to rank")
            return RankedResult()

        query_words = prepare_query_words(query)
        self.logger.info(f"Ranking {len(chunks)} chunks for query: \"{query}\"")

        for tier in self.tiers:
            selected = tier.select(chunks, query_words, max_results)
            if selected:
                top_scores = ', '.join(f"{chunk.relevance_score:.3f}" for chunk in selected[:3])
                self.logger.info(f"{tier.name} tier selected {len(selected)} chunks (top scores: {top_scores})")
                return RankedResult(chunks=selected, tier=tier.name)

            self.logger.debug(f"{tier.name} tier selected nothing, falling back")

        return RankedResult()
