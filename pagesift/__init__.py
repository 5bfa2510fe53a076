"""
PageSift - lexical search over a single web page.

Fetches a page, reduces it to prose, splits it into chunks and returns the
chunks most relevant to a natural-language query.
"""

__version__ = "0.1.0"
__author__ = "PageSift Contributors"

import requests

from .config.settings import Config
from .exceptions import PageSiftError, FetchError, InvalidRequestError, StatusTransitionError
from .scraper.page_fetcher import PageFetcher
from .scraper.markup_reducer import MarkupReducer
from .chunking.chunker import TextChunker
from .retrieval.ranker import RelevanceRanker
from .pipeline import SearchRequest, SearchOutcome, SearchPipeline, SearchService
from .storage.database import DatabaseManager


class PageSift:
   """Main PageSift interface for page search operations."""

   def __init__(self, data_dir=None, config=None, session=None):
       """Initialize PageSift with optional data directory, config and HTTP session."""
       self.config = config or Config(data_dir=data_dir)
       self.session = session or requests.Session()
       self.pipeline = None
       self.database = None
       self.service = None

   def get_pipeline(self):
       """Get or create pipeline instance."""
       if self.pipeline is None:
           self.pipeline = SearchPipeline(self.config, session=self.session)
       return self.pipeline

   def get_database(self):
       """Get or create database manager instance."""
       if self.database is None:
           self.database = DatabaseManager(self.config)
       return self.database

   def get_service(self):
       """Get or create search service instance."""
       if self.service is None:
           database = self.get_database()
           self.service = SearchService(self.get_pipeline(), tracker=database, sink=database)
       return self.service

   def build_request(self, url, query, max_results=None, max_tokens_per_chunk=None):
       """Build a search request, filling limits from configuration."""
       return SearchRequest(
           website_url=url,
           search_query=query,
           max_results=self.config.default_max_results if max_results is None else max_results,
           max_tokens_per_chunk=(self.config.default_max_tokens if max_tokens_per_chunk is None
                                 else max_tokens_per_chunk),
       )

   def search(self, url, query, max_results=None, max_tokens_per_chunk=None):
       """Search a page without recording it. Raises FetchError on fetch failure."""
       request = self.build_request(url, query, max_results, max_tokens_per_chunk)
       return self.get_pipeline().run(request)

   def submit(self, url, query, max_results=None, max_tokens_per_chunk=None):
       """Record a search, process it and return the outcome."""
       request = self.build_request(url, query, max_results, max_tokens_per_chunk)
       search_id = self.get_database().create_search(request.website_url, request.search_query)
       return self.get_service().process(search_id, request)

   def close(self):
       """Close the shared HTTP session."""
       self.session.close()


__all__ = [
   "PageSift",
   "Config",
   "PageSiftError",
   "FetchError",
   "InvalidRequestError",
   "StatusTransitionError",
   "PageFetcher",
   "MarkupReducer",
   "TextChunker",
   "RelevanceRanker",
   "SearchRequest",
   "SearchOutcome",
   "SearchPipeline",
   "SearchService",
   "DatabaseManager",
   "__version__",
   "__author__",
]
