"""
Tests for the storage module.
"""

import pytest

from pagesift.chunking.models import Chunk
from pagesift.exceptions import StatusTransitionError
from pagesift.storage.database import DatabaseManager


URL = "https://example.com/page"


class TestDatabaseManager:
    """Test cases for DatabaseManager."""

    @pytest.fixture(autouse=True)
    def setup_database(self, config):
        """Setup test fixtures."""
        self.config = config
        self.db = DatabaseManager(config)

    def complete(self, search_id, results_count=1, processing_time_ms=10):
        self.db.update_status(search_id, "processing")
        self.db.update_status(search_id, "completed",
                              processing_time_ms=processing_time_ms,
                              results_count=results_count,
                              total_chunks=5)

    def test_database_file_created(self):
        """Test that the database lives in the data directory."""
        assert self.config.db_file.exists()

    def test_create_search(self):
        """Test creating a pending search."""
        search_id = self.db.create_search(URL, "fox")
        search = self.db.get_search(search_id)

        assert search['website_url'] == URL
        assert search['search_query'] == "fox"
        assert search['status'] == "pending"
        assert search['results_count'] == 0
        assert search['chunks'] == []

    def test_ids_are_unique(self):
        """Test that each search gets its own id."""
        assert self.db.create_search(URL, "fox") != self.db.create_search(URL, "fox")

    def test_full_lifecycle(self):
        """Test pending to processing to completed."""
        search_id = self.db.create_search(URL, "fox")

        self.db.update_status(search_id, "processing")
        assert self.db.get_search(search_id)['status'] == "processing"

        self.db.update_status(search_id, "completed", processing_time_ms=42, results_count=2, total_chunks=7)
        search = self.db.get_search(search_id)
        assert search['status'] == "completed"
        assert search['processing_time_ms'] == 42
        assert search['results_count'] == 2
        assert search['total_chunks'] == 7
        assert search['error_message'] is None

    def test_failed_keeps_error_message(self):
        """Test recording a failure."""
        search_id = self.db.create_search(URL, "fox")
        self.db.update_status(search_id, "processing")
        self.db.update_status(search_id, "failed", results_count=0, error_message="boom")

        search = self.db.get_search(search_id)
        assert search['status'] == "failed"
        assert search['error_message'] == "boom"

    @pytest.mark.parametrize("path", [
        ["completed"],
        ["failed"],
        ["pending"],
        ["processing", "processing"],
        ["processing", "completed", "failed"],
        ["processing", "failed", "processing"],
    ])
    def test_invalid_transitions(self, path):
        """Test that out-of-order transitions are rejected."""
        search_id = self.db.create_search(URL, "fox")

        with pytest.raises(StatusTransitionError):
            for status in path:
                self.db.update_status(search_id, status)

    def test_unknown_status(self):
        """Test that unknown statuses are rejected."""
        search_id = self.db.create_search(URL, "fox")

        with pytest.raises(ValueError):
            self.db.update_status(search_id, "cancelled")

    def test_unknown_search(self):
        """Test updating a search that does not exist."""
        with pytest.raises(StatusTransitionError):
            self.db.update_status("missing", "processing")

    def test_save_results_ordering(self):
        """Test that chunks come back best first, then in page order."""
        search_id = self.db.create_search(URL, "fox")
        chunks = [
            Chunk("third", 1, 3, "content", 0.2),
            Chunk("first", 1, 5, "content", 0.9),
            Chunk("second-b", 1, 4, "heading", 0.5),
            Chunk("second-a", 1, 2, "content", 0.5),
        ]

        self.db.save_results(search_id, chunks, total_chunks=9)
        search = self.db.get_search(search_id)

        assert [c['chunk_content'] for c in search['chunks']] == ["first", "second-a", "second-b", "third"]
        assert search['chunks'][2]['html_tag_context'] == "heading"
        assert search['total_chunks'] == 9

    def test_get_missing_search(self):
        """Test getting a search that does not exist."""
        assert self.db.get_search("missing") is None

    def test_recent_searches(self):
        """Test recent searches are newest first and limited."""
        ids = [self.db.create_search(URL, f"query {i}") for i in range(5)]

        recent = self.db.get_recent_searches(limit=3)

        assert [s['id'] for s in recent] == ids[::-1][:3]

    def test_search_stats(self):
        """Test aggregate statistics."""
        first = self.db.create_search(URL, "fox")
        self.complete(first, results_count=3, processing_time_ms=100)
        second = self.db.create_search(URL, "dog")
        self.complete(second, results_count=1, processing_time_ms=300)
        failed = self.db.create_search(URL, "cat")
        self.db.update_status(failed, "processing")
        self.db.update_status(failed, "failed", processing_time_ms=5000, error_message="timeout")
        self.db.create_search(URL, "pending")

        stats = self.db.get_search_stats()

        assert stats['total_searches'] == 4
        assert stats['completed_searches'] == 2
        assert stats['failed_searches'] == 1
        assert stats['avg_processing_time_ms'] == pytest.approx(200)
        assert stats['total_results_found'] == 4

    def test_empty_stats(self):
        """Test statistics for an empty database."""
        stats = self.db.get_search_stats()

        assert stats['total_searches'] == 0
        assert stats['avg_processing_time_ms'] == 0
        assert stats['total_results_found'] == 0

    def test_delete_search(self):
        """Test deleting a search removes its results."""
        search_id = self.db.create_search(URL, "fox")
        self.db.save_results(search_id, [Chunk("fox", 1, 1)], total_chunks=1)

        assert self.db.delete_search(search_id)
        assert self.db.get_search(search_id) is None
        assert not self.db.delete_search(search_id)

    def test_persists_across_instances(self):
        """Test that a second manager sees the same data."""
        search_id = self.db.create_search(URL, "fox")

        assert DatabaseManager(self.config).get_search(search_id)['search_query'] == "fox"
