from typing import List, Optional, Union


class BookError(Exception):
    """Base class for failures that map onto an HTTP error response."""

    status = 500

    def __init__(self, message: Union[str, List[str]], status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status}}


class ValidationError(BookError):
    """One or more fields of a write payload are missing or have the wrong type."""

    status = 400

    def __init__(self, messages: List[str]) -> None:
        super().__init__(list(messages))


class NotFound(BookError):
    status = 404

    def __init__(self, isbn: str) -> None:
        super().__init__(f"There is no book with an isbn of {isbn}")
        self.isbn = isbn


class ConflictError(BookError):
    """The storage engine rejected a write as a uniqueness violation.

    ``code`` is the engine's own error identifier, passed through untouched.
    """

    status = 409

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["error"]["code"] = self.code
        return body
