"""
UCSB date endpoints for API v1.

Besides the usual CRUD routes, dates can be listed per quarter with
``GET /quarter?quarterYYYYQ=20221``.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_records_api.app.core.security import Role, require_role
from ucsb_records_api.app.schemas import ErrorBody, Message, UCSBDate
from ucsb_records_api.app.schemas.common import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_records_api.app.schemas.ucsb_date import QUARTER_PATTERN
from ucsb_records_api.app.services import ucsb_date_service

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorBody}}


@router.get("/all", response_model=List[UCSBDate], summary="List all ucsb dates")
async def all_ucsb_dates(current_user: dict = Depends(require_role(Role.USER))) -> List[UCSBDate]:
    return await ucsb_date_service.list_all()


@router.get("/quarter", response_model=List[UCSBDate], summary="List the ucsb dates of one quarter")
async def ucsb_dates_by_quarter(
    quarter_yyyyq: str = Query(..., alias="quarterYYYYQ", pattern=QUARTER_PATTERN),
    current_user: dict = Depends(require_role(Role.USER)),
) -> List[UCSBDate]:
    return await ucsb_date_service.list_by("quarter_yyyyq", quarter_yyyyq)


@router.get("", response_model=UCSBDate, responses=NOT_FOUND, summary="Get a single date")
async def get_ucsb_date(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.USER)),
) -> UCSBDate:
    return await ucsb_date_service.get(entity_id)


@router.post("/post", response_model=UCSBDate, summary="Create a new date")
async def post_ucsb_date(
    quarter_yyyyq: str = Query(..., alias="quarterYYYYQ", pattern=QUARTER_PATTERN),
    name: str = Query(...),
    local_date_time: datetime = Query(..., alias="localDateTime", description="e.g. 2022-01-03T00:00:00"),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> UCSBDate:
    logger.info("localDateTime=%s", local_date_time.isoformat())
    ucsb_date = UCSBDate(quarter_yyyyq=quarter_yyyyq, name=name, local_date_time=local_date_time)
    return await ucsb_date_service.create(ucsb_date)


@router.put("", response_model=UCSBDate, responses=NOT_FOUND, summary="Update a single date")
async def update_ucsb_date(
    incoming: UCSBDate,
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> UCSBDate:
    return await ucsb_date_service.update(entity_id, incoming)


@router.delete("", response_model=Message, responses=NOT_FOUND, summary="Delete a UCSBDate")
async def delete_ucsb_date(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Message:
    return await ucsb_date_service.delete(entity_id)
