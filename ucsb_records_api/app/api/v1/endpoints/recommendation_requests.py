"""
Recommendation request endpoints for API v1.

These routes expose full CRUD over recommendation requests.  Regular
users may list and read requests; only administrators may create,
update or delete them.  Dates are local ISO-8601 timestamps such as
``2022-01-03T00:00:00``.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_records_api.app.core.security import Role, require_role
from ucsb_records_api.app.schemas import ErrorBody, Message, RecommendationRequest
from ucsb_records_api.app.schemas.common import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_records_api.app.services import recommendation_request_service

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorBody}}


@router.get("/all", response_model=List[RecommendationRequest], summary="List all recommendation requests")
async def all_recommendation_requests(
    current_user: dict = Depends(require_role(Role.USER)),
) -> List[RecommendationRequest]:
    return await recommendation_request_service.list_all()


@router.get(
    "",
    response_model=RecommendationRequest,
    responses=NOT_FOUND,
    summary="Get a single recommendation request by ID",
)
async def get_recommendation_request(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.USER)),
) -> RecommendationRequest:
    """Retrieve one recommendation request.

    Returns HTTP 404 with an ``EntityNotFoundException`` body when no
    request has the given id.
    """
    return await recommendation_request_service.get(entity_id)


@router.post("/post", response_model=RecommendationRequest, summary="Create a new recommendation request")
async def post_recommendation_request(
    requester_email: str = Query(..., alias="requesterEmail"),
    professor_email: str = Query(..., alias="professorEmail"),
    explanation: str = Query(...),
    date_requested: datetime = Query(..., alias="dateRequested", description="e.g. 2022-01-03T00:00:00"),
    date_needed: datetime = Query(..., alias="dateNeeded", description="e.g. 2022-01-03T00:00:00"),
    done: bool = Query(...),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> RecommendationRequest:
    logger.info("dateRequested=%s", date_requested.isoformat())
    logger.info("dateNeeded=%s", date_needed.isoformat())
    recommendation_request = RecommendationRequest(
        requester_email=requester_email,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    return await recommendation_request_service.create(recommendation_request)


@router.put(
    "",
    response_model=RecommendationRequest,
    responses=NOT_FOUND,
    summary="Update a single recommendation request by ID",
)
async def update_recommendation_request(
    incoming: RecommendationRequest,
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> RecommendationRequest:
    """Replace every field of an existing request with the body's values."""
    return await recommendation_request_service.update(entity_id, incoming)


@router.delete("", response_model=Message, responses=NOT_FOUND, summary="Delete a recommendation request by ID")
async def delete_recommendation_request(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Message:
    return await recommendation_request_service.delete(entity_id)
