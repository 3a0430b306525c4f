"""
Record store over SQLite.

``SQLiteRepository`` is generic over a pydantic entity model whose
``id`` attribute is the numeric primary key.  Each entity kind gets its
own instance bound to a model class and a table; the column list is
derived from the model's fields, so user input never reaches the SQL
text except as bound parameters.

All queries open a fresh connection through ``core.db.get_connection``
and close it before returning, so a repository holds no state between
calls.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ucsb_records_api.app.core.db import get_cursor
from ucsb_records_api.app.schemas import (
    Commit,
    RecommendationRequest,
    UCSBDate,
    UCSBDiningCommonsMenuItem,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SQLiteRepository(Generic[T]):
    """CRUD access to one table, returning instances of ``model``."""

    def __init__(self, model: Type[T], table: str):
        self.model = model
        self.table = table
        self.columns: List[str] = [name for name in model.model_fields if name != "id"]

    def find_all(self) -> List[T]:
        """Return every record ordered by id."""
        with get_cursor() as cursor:
            rows = cursor.execute(f"SELECT * FROM {self.table} ORDER BY id ASC").fetchall()
        return [self._row_to_model(row) for row in rows]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT * FROM {self.table} WHERE id = ?",
                (entity_id,),
            ).fetchone()
        if row is None:
            return None
        return self._row_to_model(row)

    def find_all_by(self, field: str, value: Any) -> List[T]:
        """Return records whose ``field`` equals ``value``, ordered by id.

        ``field`` may be given as the Python attribute name
        (``quarter_yyyyq``) or as its wire alias (``quarterYYYYQ``).
        """
        column = self._resolve_column(field)
        with get_cursor() as cursor:
            rows = cursor.execute(
                f"SELECT * FROM {self.table} WHERE {column} = ? ORDER BY id ASC",
                (value,),
            ).fetchall()
        return [self._row_to_model(row) for row in rows]

    def save(self, record: T) -> T:
        """Insert ``record`` or overwrite the row sharing its id.

        Records without an id are inserted and a copy carrying the
        newly assigned id is returned.  Records with an id replace the
        stored row of that id, or are inserted under it if no such row
        exists.
        """
        values = record.model_dump(mode="json", exclude={"id"})
        params = [values[column] for column in self.columns]
        placeholders = ", ".join("?" for _ in self.columns)
        with get_cursor() as cursor:
            if record.id is None:
                cursor.execute(
                    f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                    params,
                )
                saved = record.model_copy(update={"id": cursor.lastrowid})
            else:
                assignments = ", ".join(f"{column} = excluded.{column}" for column in self.columns)
                cursor.execute(
                    f"INSERT INTO {self.table} (id, {', '.join(self.columns)}) "
                    f"VALUES (?, {placeholders}) "
                    f"ON CONFLICT(id) DO UPDATE SET {assignments}",
                    [record.id, *params],
                )
                saved = record
        logger.debug("Saved %s %s", self.table, saved.id)
        return saved

    def delete(self, record: T) -> None:
        """Remove the row with ``record.id``; a missing row is ignored."""
        with get_cursor() as cursor:
            cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (record.id,))

    def _resolve_column(self, field: str) -> str:
        if field in self.columns:
            return field
        for name, info in self.model.model_fields.items():
            if name != "id" and info.alias == field:
                return name
        raise ValueError(f"{self.model.__name__} has no field {field!r}")

    def _row_to_model(self, row: sqlite3.Row) -> T:
        return self.model.model_validate(dict(row))


commit_repository = SQLiteRepository(Commit, "commits")
recommendation_request_repository = SQLiteRepository(RecommendationRequest, "recommendation_requests")
dining_menu_item_repository = SQLiteRepository(UCSBDiningCommonsMenuItem, "ucsb_dining_commons_menu_items")
ucsb_date_repository = SQLiteRepository(UCSBDate, "ucsb_dates")
