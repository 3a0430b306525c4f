"""
Generic create/read/update/delete logic shared by every entity kind.

``CrudService`` binds an entity kind name (used in user-facing
messages, e.g. ``"UCSBDiningCommonsMenuItem"``) to the repository that
stores it.  Endpoints stay thin: they check roles, bind request
parameters and delegate here.  Lookups that come back empty raise
``EntityNotFoundError``, which the application renders as a 404.

Updates are full replacements: every field of the incoming record
overwrites the stored value.  There is no version column, so the last
writer wins.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel

from ucsb_records_api.app.core.errors import EntityNotFoundError, generic_message
from ucsb_records_api.app.repositories import SQLiteRepository

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CrudService(Generic[T]):
    """Service for a single entity kind."""

    def __init__(self, entity_name: str, repository: SQLiteRepository[T]):
        self.entity_name = entity_name
        self.repository = repository

    async def list_all(self) -> List[T]:
        return self.repository.find_all()

    async def list_by(self, field: str, value: Any) -> List[T]:
        return self.repository.find_all_by(field, value)

    async def get(self, entity_id: int) -> T:
        """Return the record with ``entity_id`` or raise ``EntityNotFoundError``."""
        record = self.repository.find_by_id(entity_id)
        if record is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return record

    async def create(self, record: T) -> T:
        """Persist a new record; any id on ``record`` is discarded."""
        saved = self.repository.save(record.model_copy(update={"id": None}))
        logger.info("Created %s %s", self.entity_name, saved.id)
        return saved

    async def update(self, entity_id: int, incoming: T) -> T:
        """Overwrite every field of record ``entity_id`` with ``incoming``.

        The id in ``incoming`` (if any) is ignored; the stored id is
        kept.
        """
        stored = await self.get(entity_id)
        replacement = incoming.model_dump(exclude={"id"})
        updated = self.repository.save(stored.model_copy(update=replacement))
        logger.info("Updated %s %s", self.entity_name, entity_id)
        return updated

    async def delete(self, entity_id: int) -> Dict[str, str]:
        record = await self.get(entity_id)
        self.repository.delete(record)
        logger.info("Deleted %s %s", self.entity_name, entity_id)
        return generic_message(f"{self.entity_name} with id {entity_id} deleted")
