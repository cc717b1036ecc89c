import os
import subprocess
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

import database
from books import BookService
from config import settings
from errors import NotFound
from store import SQLiteBookStore

console = Console()

app = typer.Typer(help="Books API command line")

# Filled in by the global callback
_state = {"db_file": None}


@app.callback()
def _global_options(
    db_file: Optional[str] = typer.Option(
        None,
        "--db-file",
        help="SQLite database file (default: LIBRARY_DB_FILE or books.db)",
    )
):
    """Global options for every command."""
    _state["db_file"] = db_file or database.DATABASE_FILE


def _service() -> BookService:
    return BookService(SQLiteBookStore(_state["db_file"]))


@app.command("init-db")
def init_db():
    """Create the books table if it does not exist."""
    database.initialize_database(_state["db_file"])
    console.print(f"Database initialized at {_state['db_file']}")


@app.command("list")
def list_books():
    """List every book."""
    books = _service().list()
    if not books:
        console.print("No books in the database.")
        return

    table = Table(title="Books")
    table.add_column("ISBN")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Year", justify="right")
    table.add_column("Pages", justify="right")
    for book in books:
        table.add_row(book.isbn, book.title, book.author, str(book.year), str(book.pages))
    console.print(table)


@app.command("show")
def show_book(isbn: str):
    """Show a single book."""
    try:
        book = _service().get(isbn)
    except NotFound as e:
        console.print(e.message)
        raise typer.Exit(code=1)
    for field, value in book.to_dict().items():
        console.print(f"{field}: {value}", markup=False)


@app.command("delete")
def delete_book(isbn: str):
    """Delete a book by its ISBN."""
    try:
        result = _service().delete(isbn)
    except NotFound as e:
        console.print(e.message)
        raise typer.Exit(code=1)
    console.print(result["message"])


@app.command("serve")
def serve(
    host: str = typer.Option(settings.api_host, help="Bind address"),
    port: int = typer.Option(settings.api_port, help="Bind port"),
):
    """Run the HTTP API with uvicorn."""
    console.print(f"Starting API on http://{host}:{port}")
    env = {**os.environ, "LIBRARY_DB_FILE": _state["db_file"]}
    subprocess.run([sys.executable, "-m", "uvicorn", "api:app", "--host", host, "--port", str(port)], env=env)


if __name__ == "__main__":
    app()
