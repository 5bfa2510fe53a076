"""
Search pipeline: fetch, reduce, chunk and rank a single page.
"""

from typing import Optional

import requests

from ..config.settings import Config
from ..chunking.chunker import TextChunker
from ..retrieval.ranker import RelevanceRanker
from ..scraper.markup_reducer import MarkupReducer
from ..scraper.page_fetcher import PageFetcher
from ..utils.helpers import Timer
from ..utils.logging import get_logger, log_performance
from .interfaces import StatusTracker, ResultSink
from .models import SearchRequest, SearchOutcome, PROCESSING, COMPLETED, FAILED


class SearchPipeline:
    """Runs one search request through every stage, in order."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None,
                 fetcher: Optional[PageFetcher] = None,
                 reducer: Optional[MarkupReducer] = None,
                 chunker: Optional[TextChunker] = None,
                 ranker: Optional[RelevanceRanker] = None):
        """Initialize pipeline stages, sharing the given HTTP session."""
        self.config = config
        self.logger = get_logger(__name__)
        self.fetcher = fetcher or PageFetcher(config, session=session)
        self.reducer = reducer or MarkupReducer(config.reducer_mode)
        self.chunker = chunker or TextChunker(config)
        self.ranker = ranker or RelevanceRanker()

    @log_performance
    def run(self, request: SearchRequest) -> SearchOutcome:
        """Run the pipeline. FetchError propagates; later stages cannot fail."""
        self.logger.info(f"Starting search for: {request.website_url} with query: \"{request.search_query}\"")

        with Timer("Search") as timer:
            raw = self.fetcher.fetch(request.website_url)
            self.logger.info(f"Fetched {len(raw)} characters from website ({raw.source})")

            if raw.source == "reader":
                # Reader output is already plain text
                text = self.reducer.normalize_whitespace(raw.text)
            else:
                text = self.reducer.reduce(raw.text)
            self.logger.info(f"Cleaned content: {len(text)} characters")

            chunks = self.chunker.chunk(text, request.max_tokens_per_chunk)
            ranked = self.ranker.rank(chunks, request.search_query, request.max_results)
            self.logger.info(f"Found {len(ranked)} relevant chunks")

        return SearchOutcome(
            results_count=len(ranked),
            processing_time_ms=timer.elapsed_ms,
            total_chunks=len(chunks),
            chunks=list(ranked.chunks),
            tier=ranked.tier,
        )


class SearchService:
    """Runs searches while reporting status and storing results."""

    def __init__(self, pipeline: SearchPipeline,
                 tracker: Optional[StatusTracker] = None,
                 sink: Optional[ResultSink] = None):
        """Initialize service with a pipeline and optional collaborators."""
        self.pipeline = pipeline
        self.tracker = tracker
        self.sink = sink
        self.logger = get_logger(__name__)

    def process(self, search_id: str, request: SearchRequest) -> SearchOutcome:
        """Process a pending search to a terminal status.

        Never raises: on failure the returned outcome has ``error_message``
        set and the search is recorded as failed where the tracker allows it.
        """
        with Timer() as timer:
            try:
                self._update_status(search_id, PROCESSING)

                outcome = self.pipeline.run(request)
                outcome.search_id = search_id

                if self.sink is not None:
                    self.sink.save_results(search_id, outcome.chunks, outcome.total_chunks)

                outcome.processing_time_ms = timer.elapsed_ms
                self._update_status(search_id, COMPLETED,
                                    processing_time_ms=outcome.processing_time_ms,
                                    results_count=outcome.results_count,
                                    total_chunks=outcome.total_chunks)
                return outcome

            except Exception as e:
                self.logger.error(f"Search {search_id} failed: {e}")
                error_outcome = SearchOutcome(
                    search_id=search_id,
                    processing_time_ms=timer.elapsed_ms,
                    error_message=str(e),
                )

        try:
            self._update_status(search_id, FAILED,
                                processing_time_ms=error_outcome.processing_time_ms,
                                results_count=0,
                                error_message=error_outcome.error_message)
        except Exception as e:
            self.logger.error(f"Could not record failure of search {search_id}: {e}")

        return error_outcome

    def _update_status(self, search_id: str, status: str, **fields) -> None:
        if self.tracker is not None:
            self.tracker.update_status(search_id, status, **fields)
