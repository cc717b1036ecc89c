import pytest
from fastapi.testclient import TestClient

from api import app, get_service
from book import Book
from books import BookService
from store import SQLiteBookStore

SAMPLE_BOOK = {
    "isbn": "070116555",
    "amazon_url": "http://a.co/eobPts78",
    "author": "Matthew Landen",
    "language": "english",
    "pages": 165,
    "publisher": "Princeton University Press",
    "title": "I Do It For Me!",
    "year": 2012,
}


@pytest.fixture
def db_file(tmp_path, request):
    # Her test için benzersiz bir veritabanı dosyası
    return str(tmp_path / f"test_{request.node.name}.db")


@pytest.fixture
def store(db_file):
    return SQLiteBookStore(db_file)


@pytest.fixture
def service(store):
    return BookService(store)


@pytest.fixture
def sample_book(store):
    return store.insert_book(Book.from_dict(SAMPLE_BOOK))


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
