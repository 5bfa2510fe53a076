"""
Lexical relevance scorers.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import List


MIN_QUERY_WORD_LENGTH = 3
LEADING_WINDOW = 200
LENIENT_VARIANT_SCORE = 0.3
LENIENT_FLOOR = 0.1


def prepare_query_words(query: str) -> List[str]:
    """Lower-case and split a query, dropping words of two characters or fewer."""
    if not query:
        return []
    return [word for word in query.lower().split() if len(word) >= MIN_QUERY_WORD_LENGTH]


class RelevanceScorer(ABC):
    """Abstract base class for relevance scorers."""

    name = "base"

    @abstractmethod
    def score(self, content: str, query_words: List[str]) -> float:
        """Score content against prepared query words."""
        pass


class StrictScorer(RelevanceScorer):
    """Scores whole-word and substring hits, normalized by content length."""

    name = "strict"

    def score(self, content: str, query_words: List[str]) -> float:
        if not query_words or not content:
            return 0.0

        content_lower = content.lower()
        raw_score = 0.0

        for word in query_words:
            exact_matches = len(re.findall(rf'\b{re.escape(word)}\b', content_lower))
            raw_score += exact_matches * 2

            partial_matches = max(content_lower.count(word) - exact_matches, 0)
            raw_score += partial_matches * 0.5

            # Words near the start of a chunk count extra
            if word in content_lower[:LEADING_WINDOW]:
                raw_score += 1

        normalizer = math.log(len(content) + 1) * len(query_words)
        if normalizer <= 0:
            return 0.0

        return min(raw_score / normalizer, 1.0)


class LenientScorer(RelevanceScorer):
    """Scores substring hits and simple morphological variants."""

    name = "lenient"

    def score(self, content: str, query_words: List[str]) -> float:
        if not query_words or not content:
            return 0.0

        floor = LENIENT_FLOOR if any(ch.islower() for ch in content) else 0.0
        content_lower = content.lower()
        raw_score = 0.0

        for word in query_words:
            if word in content_lower:
                raw_score += 1
                continue

            for variant in self.variants(word):
                if variant in content_lower:
                    raw_score += LENIENT_VARIANT_SCORE
                    break

        return max(raw_score / len(query_words), floor)

    @staticmethod
    def variants(word: str) -> List[str]:
        """Plural, gerund, past tense and truncated stems of a word."""
        candidates = [word + 's', word + 'ing', word + 'ed', word[:-1], word[:-2]]
        return [candidate for candidate in candidates if len(candidate) > 2]
