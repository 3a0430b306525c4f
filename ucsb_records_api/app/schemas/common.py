"""
Shared pydantic configuration and small response bodies.

Entity models keep snake_case attribute names in Python and the
database, and speak camelCase on the wire (``authorLogin``,
``commitTime``).  ``populate_by_name`` lets the repository build models
straight from ``sqlite3.Row`` objects keyed by column name.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class Message(BaseModel):
    """Body returned by successful deletes."""

    message: str = Field(..., examples=["Commit with id 1 deleted"])


class ErrorBody(BaseModel):
    """Body returned with HTTP 404 when a record does not exist."""

    type: str = Field(..., examples=["EntityNotFoundException"])
    message: str = Field(..., examples=["Commit with id 7 not found"])


# SQLite INTEGER range; ids outside it fail in sqlite3 itself.
MIN_ENTITY_ID = -(2**63)
MAX_ENTITY_ID = 2**63 - 1
