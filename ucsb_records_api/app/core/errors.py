"""
Error types shared by the entity endpoints and their JSON rendering.

``EntityNotFoundError`` is raised by the service layer whenever a
lookup by id comes back empty.  The handler registered in
``create_app`` turns it into::

    HTTP 404
    {"type": "EntityNotFoundException", "message": "Commit with id 7 not found"}
"""

import logging
from typing import Any, Dict

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EntityNotFoundError(Exception):
    """Raised when no record of ``entity_name`` has the given id."""

    error_type = "EntityNotFoundException"

    def __init__(self, entity_name: str, entity_id: Any):
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.message = f"{entity_name} with id {entity_id} not found"
        super().__init__(self.message)


def generic_message(message: str) -> Dict[str, str]:
    return {"message": message}


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"type": exc.error_type, "message": exc.message},
    )
