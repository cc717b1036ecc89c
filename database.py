import logging
import sqlite3
from typing import Any, Dict, List, Optional, Sequence

from config import settings

logger = logging.getLogger(__name__)

# Read at call time by get_db_connection, so callers may repoint it.
DATABASE_FILE = settings.database_file


class QueryResult:
    """Rows returned by a statement plus the number of rows it touched."""

    def __init__(self, rows: List[Dict[str, Any]], rowcount: int) -> None:
        self.rows = rows
        self.rowcount = rowcount

    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


def get_db_connection(db_file: Optional[str] = None) -> sqlite3.Connection:
    """Establishes a connection to the SQLite database."""
    conn = sqlite3.connect(db_file or DATABASE_FILE)
    conn.row_factory = sqlite3.Row
    return conn


def execute(sql: str, params: Sequence[Any] = (), db_file: Optional[str] = None) -> QueryResult:
    """Run a single parameterized statement and commit it.

    Errors raised by sqlite3 are not caught here; callers decide which of
    them mean something in their domain.
    """
    conn = get_db_connection(db_file)
    try:
        cursor = conn.execute(sql, tuple(params))
        rows = [dict(row) for row in cursor.fetchall()]
        conn.commit()
        return QueryResult(rows, cursor.rowcount)
    finally:
        conn.close()


def create_tables(db_file: Optional[str] = None) -> None:
    """Creates the books table if it doesn't exist."""
    execute("""
        CREATE TABLE IF NOT EXISTS books (
            isbn TEXT PRIMARY KEY,
            amazon_url TEXT NOT NULL,
            author TEXT NOT NULL,
            language TEXT NOT NULL,
            pages INTEGER NOT NULL,
            publisher TEXT NOT NULL,
            title TEXT NOT NULL,
            year INTEGER NOT NULL
        )
    """, db_file=db_file)


def initialize_database(db_file: Optional[str] = None) -> None:
    """Initializes the database, creating tables if needed."""
    create_tables(db_file)
    logger.info(f"Database ready at {db_file or DATABASE_FILE}")
