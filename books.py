import logging
from typing import Any, List

from book import Book
from errors import ConflictError, NotFound, ValidationError
from store import BookStore
from validators import validate

logger = logging.getLogger(__name__)


class BookService:
    """CRUD operations on books, validated against the ``Book`` model.

    The service keeps no state of its own; everything goes through the
    injected store.
    """

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def list(self) -> List[Book]:
        return self.store.list_books()

    def get(self, isbn: str) -> Book:
        book = self.store.get_book(isbn)
        if book is None:
            logger.warning(f"Book not found: isbn={isbn}")
            raise NotFound(isbn)
        return book

    def create(self, payload: Any) -> Book:
        """Validate ``payload`` and insert it as a new book.

        Duplicate ISBNs are left for the storage engine to reject.
        """
        book = self._validated(payload)
        try:
            self.store.insert_book(book)
        except ConflictError as e:
            logger.warning(f"Duplicate isbn rejected: isbn={book.isbn}, code={e.code}")
            raise
        logger.info(f"Book created: isbn={book.isbn}")
        return book

    def update(self, isbn: str, payload: Any) -> Book:
        """Replace every field of the book at ``isbn``.

        The path isbn wins over any isbn in the body.
        """
        if isinstance(payload, dict):
            payload = {**payload, "isbn": isbn}
        book = self._validated(payload)
        if not self.store.update_book(isbn, book):
            logger.warning(f"Book not found for update: isbn={isbn}")
            raise NotFound(isbn)
        logger.info(f"Book updated: isbn={isbn}")
        return book

    def delete(self, isbn: str) -> dict:
        if not self.store.delete_book(isbn):
            logger.warning(f"Book not found for delete: isbn={isbn}")
            raise NotFound(isbn)
        logger.info(f"Book deleted: isbn={isbn}")
        return {"message": "Book deleted"}

    @staticmethod
    def _validated(payload: Any) -> Book:
        errors = validate(payload, Book)
        if errors:
            logger.warning(f"Book payload rejected with {len(errors)} error(s)")
            raise ValidationError(errors)
        return Book.from_dict(payload)
