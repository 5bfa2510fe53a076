"""
Database manager for search status and results.
"""

import sqlite3
import uuid
from contextlib import closing
from datetime import datetime
from typing import Dict, List, Any, Optional

from ..config.settings import Config
from ..chunking.models import Chunk
from ..exceptions import StatusTransitionError
from ..pipeline.interfaces import StatusTracker, ResultSink
from ..pipeline.models import PENDING, SEARCH_STATUSES, STATUS_TRANSITIONS
from ..utils.logging import get_logger


class DatabaseManager(StatusTracker, ResultSink):
   """Manages persistent storage for searches and their ranked chunks."""

   def __init__(self, config: Config):
       """Initialize database manager with configuration."""
       self.config = config
       self.logger = get_logger(__name__)
       self.db_path = config.db_file
       self._init_database()

   def _connect(self) -> sqlite3.Connection:
       conn = sqlite3.connect(self.db_path)
       conn.row_factory = sqlite3.Row
       conn.execute("PRAGMA foreign_keys = ON")
       return conn

   def _init_database(self):
       """Initialize database tables if they don't exist."""
       with closing(self._connect()) as conn, conn:
           cursor = conn.cursor()

           cursor.execute("""
               CREATE TABLE IF NOT EXISTS searches (
                   id TEXT PRIMARY KEY,
                   website_url TEXT NOT NULL,
                   search_query TEXT NOT NULL,
                   status TEXT NOT NULL DEFAULT 'pending',
                   total_chunks INTEGER DEFAULT 0,
                   results_count INTEGER DEFAULT 0,
                   processing_time_ms INTEGER,
                   error_message TEXT,
                   created_at TIMESTAMP,
                   updated_at TIMESTAMP
               )
           """)

           cursor.execute("""
               CREATE TABLE IF NOT EXISTS search_results (
                   id INTEGER PRIMARY KEY AUTOINCREMENT,
                   search_id TEXT NOT NULL REFERENCES searches(id) ON DELETE CASCADE,
                   chunk_content TEXT NOT NULL,
                   chunk_tokens INTEGER NOT NULL,
                   relevance_score REAL DEFAULT 0.0,
                   chunk_index INTEGER NOT NULL,
                   html_tag_context TEXT,
                   created_at TIMESTAMP
               )
           """)

           cursor.execute("CREATE INDEX IF NOT EXISTS idx_searches_created_at ON searches(created_at DESC)")
           cursor.execute("CREATE INDEX IF NOT EXISTS idx_search_results_search_id ON search_results(search_id)")

       self.logger.debug(f"Database initialized at {self.db_path}")

   def create_search(self, website_url: str, search_query: str) -> str:
       """Create a pending search and return its id."""
       search_id = str(uuid.uuid4())
       now = datetime.now().isoformat()

       with closing(self._connect()) as conn, conn:
           conn.execute("""
               INSERT INTO searches
               (id, website_url, search_query, status, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?)
           """, (search_id, website_url, search_query, PENDING, now, now))

       self.logger.info(f"Created search {search_id}")
       return search_id

   def update_status(self, search_id: str, status: str,
                     processing_time_ms: Optional[int] = None,
                     results_count: Optional[int] = None,
                     error_message: Optional[str] = None,
                     total_chunks: Optional[int] = None) -> None:
       """Move a search to a new status, rejecting out-of-order changes."""
       if status not in SEARCH_STATUSES:
           raise ValueError(f"Unknown search status: {status}")

       updates = {'status': status, 'updated_at': datetime.now().isoformat()}
       if processing_time_ms is not None:
           updates['processing_time_ms'] = processing_time_ms
       if results_count is not None:
           updates['results_count'] = results_count
       if error_message:
           updates['error_message'] = error_message
       if total_chunks is not None:
           updates['total_chunks'] = total_chunks

       with closing(self._connect()) as conn, conn:
           row = conn.execute("SELECT status FROM searches WHERE id = ?", (search_id,)).fetchone()
           if row is None:
               raise StatusTransitionError(f"Search not found: {search_id}")

           current = row['status']
           if status not in STATUS_TRANSITIONS.get(current, ()):
               raise StatusTransitionError(f"Cannot move search {search_id} from {current} to {status}")

           assignments = ", ".join(f"{column} = ?" for column in updates)
           conn.execute(f"UPDATE searches SET {assignments} WHERE id = ?",
                        (*updates.values(), search_id))

       self.logger.debug(f"Search {search_id}: {current} -> {status}")

   def save_results(self, search_id: str, chunks: List[Chunk], total_chunks: int) -> None:
       """Save ranked chunks for a search."""
       now = datetime.now().isoformat()

       with closing(self._connect()) as conn, conn:
           conn.execute("UPDATE searches SET total_chunks = ? WHERE id = ?", (total_chunks, search_id))
           conn.executemany("""
               INSERT INTO search_results
               (search_id, chunk_content, chunk_tokens, relevance_score, chunk_index,
                html_tag_context, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)
           """, [
               (search_id, chunk.content, chunk.estimated_tokens, chunk.relevance_score,
                chunk.chunk_index, chunk.content_context, now)
               for chunk in chunks
           ])

       self.logger.info(f"Saved {len(chunks)} search results for {search_id}")

   def get_search(self, search_id: str) -> Optional[Dict[str, Any]]:
       """Get a search with its chunks, best first."""
       with closing(self._connect()) as conn:
           row = conn.execute("SELECT * FROM searches WHERE id = ?", (search_id,)).fetchone()
           if row is None:
               return None

           search = dict(row)
           results = conn.execute("""
               SELECT * FROM search_results
               WHERE search_id = ?
               ORDER BY relevance_score DESC, chunk_index ASC
           """, (search_id,)).fetchall()

       search['chunks'] = [dict(result) for result in results]
       return search

   def get_recent_searches(self, limit: int = 10) -> List[Dict[str, Any]]:
       """Get recent search history."""
       with closing(self._connect()) as conn:
           rows = conn.execute("""
               SELECT * FROM searches
               ORDER BY created_at DESC, rowid DESC
               LIMIT ?
           """, (limit,)).fetchall()

       return [dict(row) for row in rows]

   def get_search_stats(self) -> Dict[str, Any]:
       """Get search statistics."""
       with closing(self._connect()) as conn:
           row = conn.execute("""
               SELECT
                   COUNT(*) AS total_searches,
                   COUNT(CASE WHEN status = 'completed' THEN 1 END) AS completed_searches,
                   COUNT(CASE WHEN status = 'failed' THEN 1 END) AS failed_searches,
                   AVG(CASE WHEN status = 'completed' THEN processing_time_ms END) AS avg_processing_time,
                   SUM(CASE WHEN status = 'completed' THEN results_count END) AS total_results_found
               FROM searches
           """).fetchone()

       return {
           'total_searches': row['total_searches'] or 0,
           'completed_searches': row['completed_searches'] or 0,
           'failed_searches': row['failed_searches'] or 0,
           'avg_processing_time_ms': row['avg_processing_time'] or 0,
           'total_results_found': row['total_results_found'] or 0,
       }

   def delete_search(self, search_id: str) -> bool:
       """Delete a search and its results."""
       with closing(self._connect()) as conn, conn:
           cursor = conn.execute("DELETE FROM searches WHERE id = ?", (search_id,))
           deleted = cursor.rowcount > 0

       if deleted:
           self.logger.info(f"Deleted search {search_id}")
       return deleted
