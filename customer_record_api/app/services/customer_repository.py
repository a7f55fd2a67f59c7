"""
Persistence operations for customer records.

``CustomerRepository`` translates already-validated payloads into
statements against the ``customers`` table.  All statements use
parameter binding; user input never becomes part of the SQL text.
Engine failures surface as ``StoreError`` (raised by
``CustomerStore.cursor``) and are not retried.
"""

from __future__ import annotations

import logging
import math
import sqlite3
from typing import List

from fastapi import Depends

from customer_record_api.app.core.db import CustomerStore, get_store
from customer_record_api.app.core.errors import NotFoundError
from customer_record_api.app.core.validation import MAX_SQLITE_INTEGER, MIN_SQLITE_INTEGER
from customer_record_api.app.schemas.customer import (
    CustomerCreate,
    CustomerPage,
    CustomerRead,
    CustomerUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5

COLUMNS = "id, first_name, last_name, phone_number, email, address"
SEARCHABLE_COLUMNS = ("first_name", "last_name", "email", "address")


def is_storable_id(customer_id: int) -> bool:
    return MIN_SQLITE_INTEGER <= customer_id <= MAX_SQLITE_INTEGER


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` is matched literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CustomerRepository:
    """Data access for the ``customers`` table."""

    def __init__(self, store: CustomerStore) -> None:
        self.store = store

    async def insert(self, data: CustomerCreate) -> int:
        """Insert a new row and return the id assigned by SQLite."""
        with self.store.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO customers (first_name, last_name, phone_number, email, address)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.first_name, data.last_name, data.phone_number, data.email, data.address),
            )
            customer_id = cursor.lastrowid
        logger.info("Created customer %s", customer_id)
        return customer_id

    async def get_by_id(self, customer_id: int) -> CustomerRead:
        """Return the row with ``customer_id`` or raise ``NotFoundError``."""
        if not is_storable_id(customer_id):
            raise NotFoundError()
        with self.store.cursor() as cursor:
            row = cursor.execute(
                f"SELECT {COLUMNS} FROM customers WHERE id = ?",
                (customer_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError()
        return self._row_to_customer(row)

    async def update(self, customer_id: int, data: CustomerUpdate) -> int:
        """Rewrite all mutable fields of a row.

        Returns the number of affected rows; ``0`` means no customer
        has ``customer_id``.
        """
        if not is_storable_id(customer_id):
            return 0
        with self.store.cursor() as cursor:
            cursor.execute(
                """
                UPDATE customers
                SET first_name = ?, last_name = ?, phone_number = ?, email = ?, address = ?
                WHERE id = ?
                """,
                (
                    data.first_name,
                    data.last_name,
                    data.phone_number,
                    data.email,
                    data.address,
                    customer_id,
                ),
            )
            affected = cursor.rowcount
        if affected:
            logger.info("Updated customer %s", customer_id)
        return affected

    async def delete(self, customer_id: int) -> int:
        if not is_storable_id(customer_id):
            return 0
        with self.store.cursor() as cursor:
            cursor.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted customer %s", customer_id)
        return affected

    async def search(self, term: str) -> List[CustomerRead]:
        """Case-insensitive substring search over names, email and address.

        The result is not capped; an empty ``term`` matches every row
        whose searchable columns are not all NULL.
        """
        pattern = f"%{escape_like(term)}%"
        where = " OR ".join(f"{column} LIKE ? ESCAPE '\\'" for column in SEARCHABLE_COLUMNS)
        with self.store.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {COLUMNS} FROM customers WHERE {where} ORDER BY id",
                (pattern,) * len(SEARCHABLE_COLUMNS),
            ).fetchall()
        return [self._row_to_customer(row) for row in rows]

    async def count(self) -> int:
        with self.store.cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM customers").fetchone()
        return row["total"]

    async def page(self, page_number: int, page_size: int = DEFAULT_PAGE_SIZE) -> CustomerPage:
        """Return one page of customers in insertion order.

        ``page_number`` is 1-based; values below 1 are treated as 1.
        The total is read first, then the slice, as two separate
        statements.  Offsets past the largest SQLite integer are clamped,
        which still yields an empty page.
        """
        page_number = max(page_number, 1)
        offset = min((page_number - 1) * page_size, MAX_SQLITE_INTEGER)
        total = await self.count()
        with self.store.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {COLUMNS} FROM customers ORDER BY id LIMIT ? OFFSET ?",
                (page_size, offset),
            ).fetchall()
        return CustomerPage(
            totalCustomers=total,
            totalPages=math.ceil(total / page_size),
            customers=[self._row_to_customer(row) for row in rows],
        )

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> CustomerRead:
        return CustomerRead.model_validate(dict(row))


def get_customer_repository(store: CustomerStore = Depends(get_store)) -> CustomerRepository:
    """FastAPI dependency building a repository around the shared store."""
    return CustomerRepository(store)
