"""
SQLite connection and schema management.

Both SQLite repositories share a single connection so that loans can
reference books through a foreign key.

Schema:
    books(id, isbn UNIQUE, title, author)
    loans(id, book_id -> books.id, customer, isbn, loan_date, returned)

The UNIQUE constraint on books.isbn and the partial unique index on active
loans back up the service-level checks when two requests race.
"""

import sqlite3
from pathlib import Path

from loguru import logger

SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    isbn TEXT NOT NULL UNIQUE,
    title TEXT,
    author TEXT
);

CREATE TABLE IF NOT EXISTS loans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    book_id INTEGER NOT NULL REFERENCES books(id),
    customer TEXT NOT NULL,
    isbn TEXT,
    loan_date TEXT NOT NULL,
    returned INTEGER
);

CREATE UNIQUE INDEX IF NOT EXISTS ux_loans_active_book
    ON loans(book_id) WHERE returned IS NULL OR returned = 0;
"""

IN_MEMORY = ":memory:"


class SQLiteDatabase:
    """
    Owns the SQLite connection used by the SQLite repositories.

    Usage:
        database = SQLiteDatabase("./.data/library.db")
        books = SQLiteBookRepository(database)
        ...
        database.close()
    """

    def __init__(self, path: str = IN_MEMORY):
        """
        Open the database and create the schema if needed.

        Args:
            path: Database file path, or ":memory:" for a private in-memory database
        """
        self.path = path

        if path != IN_MEMORY:
            Path(path).parent.mkdir(parents=True, exist_ok=True)

        self.connection = sqlite3.connect(path, check_same_thread=False)
        self.connection.row_factory = sqlite3.Row
        self.connection.execute("PRAGMA foreign_keys = ON;")
        self.connection.executescript(SCHEMA)
        self.connection.commit()

        logger.info(f"Opened SQLite database at {path}")

    def execute(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        """Run a single statement and commit."""
        with self.connection:
            return self.connection.execute(sql, parameters)

    def query(self, sql: str, parameters: tuple = ()) -> list[sqlite3.Row]:
        """Run a read-only query and fetch every row."""
        return self.connection.execute(sql, parameters).fetchall()

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()
        logger.info(f"Closed SQLite database at {self.path}")
