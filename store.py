import logging
import sqlite3
from typing import List, Optional

from book import Book, BOOK_FIELDS
from database import execute, initialize_database
from errors import ConflictError

logger = logging.getLogger(__name__)

# sqlite extended result codes raised for a duplicate key
UNIQUE_VIOLATIONS = ("SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE")

_COLUMNS = ", ".join(BOOK_FIELDS)


class BookStore:
    """Storage port used by the book service."""

    def list_books(self) -> List[Book]:
        raise NotImplementedError

    def get_book(self, isbn: str) -> Optional[Book]:
        raise NotImplementedError

    def insert_book(self, book: Book) -> Book:
        raise NotImplementedError

    def update_book(self, isbn: str, book: Book) -> bool:
        raise NotImplementedError

    def delete_book(self, isbn: str) -> bool:
        raise NotImplementedError


class SQLiteBookStore(BookStore):
    """Keeps books in the ``books`` table of a SQLite database file."""

    def __init__(self, db_file: Optional[str] = None) -> None:
        self.db_file = db_file
        initialize_database(db_file)

    def list_books(self) -> List[Book]:
        result = execute(f"SELECT {_COLUMNS} FROM books ORDER BY rowid", db_file=self.db_file)
        return [Book.from_dict(row) for row in result.rows]

    def get_book(self, isbn: str) -> Optional[Book]:
        row = execute(
            f"SELECT {_COLUMNS} FROM books WHERE isbn = ?", (isbn,), db_file=self.db_file
        ).first()
        return Book.from_dict(row) if row else None

    def insert_book(self, book: Book) -> Book:
        placeholders = ", ".join("?" for _ in BOOK_FIELDS)
        values = [getattr(book, field) for field in BOOK_FIELDS]
        try:
            execute(f"INSERT INTO books ({_COLUMNS}) VALUES ({placeholders})", values, db_file=self.db_file)
        except sqlite3.IntegrityError as e:
            if e.sqlite_errorname in UNIQUE_VIOLATIONS:
                raise ConflictError(f"Book with ISBN {book.isbn} already exists.", e.sqlite_errorname) from e
            raise
        return book

    def update_book(self, isbn: str, book: Book) -> bool:
        fields = [field for field in BOOK_FIELDS if field != "isbn"]
        assignments = ", ".join(f"{field} = ?" for field in fields)
        values = [getattr(book, field) for field in fields]
        result = execute(
            f"UPDATE books SET {assignments} WHERE isbn = ?", values + [isbn], db_file=self.db_file
        )
        return result.rowcount > 0

    def delete_book(self, isbn: str) -> bool:
        result = execute("DELETE FROM books WHERE isbn = ?", (isbn,), db_file=self.db_file)
        return result.rowcount > 0
