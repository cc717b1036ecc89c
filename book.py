from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, StrictStr

# Range of a SQLite INTEGER column
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


class Book(BaseModel):
    """A single book record.

    Field order matches the books table columns and is the order
    validation errors are reported in.
    """

    isbn: StrictStr
    amazon_url: StrictStr
    author: StrictStr
    language: StrictStr
    pages: StrictInt = Field(gt=0, le=SQLITE_INT_MAX)
    publisher: StrictStr
    title: StrictStr
    year: StrictInt = Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)

    def to_dict(self) -> dict:
        return self.model_dump()

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book.model_validate(data)


BOOK_FIELDS = tuple(Book.model_fields)
