"""
SQLite storage handle for customer records.

``CustomerStore`` owns the single connection used by the process.  It
is created and opened once by the application lifespan, handed to the
request handlers through a FastAPI dependency, and closed on shutdown.
Every statement issued through ``CustomerStore.cursor`` is committed on
success; any ``sqlite3.Error`` is rolled back and re-raised as
``StoreError`` so that callers never deal with driver exceptions.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import Request

from .errors import StoreError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

SCHEMA = """
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT,
    last_name TEXT,
    phone_number TEXT,
    email TEXT,
    address TEXT
)
"""


def get_database_path(database_url: str) -> str:
    """Resolve ``database_url`` to a path SQLite can open.

    Absolute paths and ``:memory:`` are returned as is; relative paths
    are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # customer_record_api/
    return str((base_dir / database_url).resolve())


class CustomerStore:
    """Process-wide SQLite connection with an explicit open/close lifecycle."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None
        self._closed = False

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("CustomerStore is not open")
        return self._conn

    def open(self) -> "CustomerStore":
        """Connect to the database and create the ``customers`` table if absent.

        A store is opened at most once; reopening a closed store is
        refused so that the handle is never recreated mid-process.
        """
        if self._conn is not None or self._closed:
            raise RuntimeError("CustomerStore can only be opened once")
        try:
            # Handlers and test fixtures may touch the connection from
            # different threads; SQLite serialises access itself.
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            logger.error("Could not open SQLite database %s: %s", self.path, exc)
            raise StoreError(str(exc)) from exc
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self.init_schema()
        logger.info("Connected to the SQLite database at %s", self.path)
        return self

    def init_schema(self) -> None:
        with self.cursor() as cursor:
            cursor.execute(SCHEMA)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        self._closed = True
        logger.info("Closed the SQLite database at %s", self.path)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on exit, roll back and wrap driver errors."""
        conn = self.connection
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        finally:
            cursor.close()


def get_store(request: Request) -> CustomerStore:
    """FastAPI dependency returning the store opened by the application lifespan."""
    return request.app.state.store
