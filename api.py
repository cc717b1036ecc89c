import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

import database
from book import Book
from books import BookService
from config import settings
from errors import BookError
from store import SQLiteBookStore

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


# Global service instance, created on startup
service: Optional[BookService] = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    global service
    service = BookService(SQLiteBookStore(database.DATABASE_FILE))
    logger.info(f"{settings.app_name} {settings.app_version} started ({settings.environment})")
    yield
    service = None

app = FastAPI(title=settings.app_name, version=settings.app_version, debug=settings.debug, lifespan=lifespan)


def get_service() -> BookService:
    """Dependency returning the book service; tests override it."""
    return service


# --- Models ---
class BookResponse(BaseModel):
    book: Book

class BookListResponse(BaseModel):
    books: List[Book]

class MessageResponse(BaseModel):
    message: str


# --- Error handling ---
def _error_response(status: int, message: Any, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": {"message": message, "status": status}}, headers=headers)

@app.exception_handler(BookError)
async def book_error_handler(request: Request, exc: BookError):
    return JSONResponse(status_code=exc.status, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON or a non-object body; field rules are checked by the service.
    messages = [error["msg"] for error in exc.errors()]
    return _error_response(400, messages)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, "Internal Server Error")


# --- API Endpoints ---
@app.get("/books", response_model=BookListResponse)
def list_books(books: BookService = Depends(get_service)):
    """Get every stored book."""
    return {"books": [book.to_dict() for book in books.list()]}

@app.get("/books/{isbn}", response_model=BookResponse)
def get_book(isbn: str, books: BookService = Depends(get_service)):
    """Get a single book by its ISBN."""
    return {"book": books.get(isbn).to_dict()}

@app.post("/books", response_model=BookResponse, status_code=201)
def create_book(payload: Dict[str, Any] = Body(...), books: BookService = Depends(get_service)):
    """Add a new book. All fields are required."""
    return {"book": books.create(payload).to_dict()}

@app.put("/books/{isbn}", response_model=BookResponse)
def update_book(isbn: str, payload: Dict[str, Any] = Body(...), books: BookService = Depends(get_service)):
    """Replace every field of a book. The ISBN in the path wins over the body."""
    return {"book": books.update(isbn, payload).to_dict()}

@app.delete("/books/{isbn}", response_model=MessageResponse)
def delete_book(isbn: str, books: BookService = Depends(get_service)):
    """Delete a book by its ISBN."""
    return books.delete(isbn)
