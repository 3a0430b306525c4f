"""
Commit endpoints for API v1.

Any logged-in user may list commits or fetch one by id; creating,
updating and deleting commits is restricted to administrators.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import AwareDatetime

from ucsb_records_api.app.core.security import Role, require_role
from ucsb_records_api.app.schemas import Commit, ErrorBody, Message
from ucsb_records_api.app.schemas.common import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_records_api.app.services import commit_service

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorBody}}


@router.get("/all", response_model=List[Commit], summary="List all commits")
async def all_commits(current_user: dict = Depends(require_role(Role.USER))) -> List[Commit]:
    return await commit_service.list_all()


@router.get("", response_model=Commit, responses=NOT_FOUND, summary="Get a single commit")
async def get_commit(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.USER)),
) -> Commit:
    return await commit_service.get(entity_id)


@router.post("/post", response_model=Commit, summary="Create a new commit")
async def post_commit(
    message: str = Query(...),
    url: str = Query(...),
    author_login: str = Query(..., alias="authorLogin", description="GitHub login of the author"),
    commit_time: AwareDatetime = Query(
        ..., alias="commitTime", description="ISO-8601 timestamp with zone offset"
    ),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Commit:
    """Create a commit from query parameters and return it with its new id."""
    logger.info("commitTime=%s", commit_time.isoformat())
    commit = Commit(
        message=message,
        url=url,
        author_login=author_login,
        commit_time=commit_time,
    )
    return await commit_service.create(commit)


@router.put("", response_model=Commit, responses=NOT_FOUND, summary="Update a single commit")
async def update_commit(
    incoming: Commit,
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Commit:
    return await commit_service.update(entity_id, incoming)


@router.delete("", response_model=Message, responses=NOT_FOUND, summary="Delete a commit")
async def delete_commit(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Message:
    return await commit_service.delete(entity_id)
