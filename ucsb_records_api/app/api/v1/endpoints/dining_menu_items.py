"""
UCSB dining commons menu item endpoints for API v1.

Menu items name a dish, the dining commons serving it (by code, e.g.
``ortega`` or ``de-la-guerra``) and the station it is served at.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_records_api.app.core.security import Role, require_role
from ucsb_records_api.app.schemas import ErrorBody, Message, UCSBDiningCommonsMenuItem
from ucsb_records_api.app.schemas.common import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_records_api.app.services import dining_menu_item_service

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorBody}}


@router.get(
    "/all",
    response_model=List[UCSBDiningCommonsMenuItem],
    summary="List all ucsb dining commons menu items",
)
async def all_dining_menu_items(
    current_user: dict = Depends(require_role(Role.USER)),
) -> List[UCSBDiningCommonsMenuItem]:
    return await dining_menu_item_service.list_all()


@router.get(
    "",
    response_model=UCSBDiningCommonsMenuItem,
    responses=NOT_FOUND,
    summary="Get a single UCSBDiningCommonsMenuItem",
)
async def get_dining_menu_item(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.USER)),
) -> UCSBDiningCommonsMenuItem:
    return await dining_menu_item_service.get(entity_id)


@router.post("/post", response_model=UCSBDiningCommonsMenuItem, summary="Create a new dining commons menu item")
async def post_dining_menu_item(
    dining_commons_code: str = Query(..., alias="diningCommonsCode"),
    name: str = Query(...),
    station: str = Query(...),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> UCSBDiningCommonsMenuItem:
    item = UCSBDiningCommonsMenuItem(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    return await dining_menu_item_service.create(item)


@router.put(
    "",
    response_model=UCSBDiningCommonsMenuItem,
    responses=NOT_FOUND,
    summary="Update a single dining commons menu item",
)
async def update_dining_menu_item(
    incoming: UCSBDiningCommonsMenuItem,
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> UCSBDiningCommonsMenuItem:
    return await dining_menu_item_service.update(entity_id, incoming)


@router.delete("", response_model=Message, responses=NOT_FOUND, summary="Delete a dining commons menu item")
async def delete_dining_menu_item(
    entity_id: int = Query(..., alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
    current_user: dict = Depends(require_role(Role.ADMIN)),
) -> Message:
    return await dining_menu_item_service.delete(entity_id)
