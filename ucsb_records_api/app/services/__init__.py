"""
Service layer.

One ``CrudService`` instance per entity kind.  The entity kind name
passed here is what appears in not-found and deleted messages.
"""

from ucsb_records_api.app.repositories import (
    commit_repository,
    dining_menu_item_repository,
    recommendation_request_repository,
    ucsb_date_repository,
)
from ucsb_records_api.app.services.crud_service import CrudService

commit_service = CrudService("Commit", commit_repository)
recommendation_request_service = CrudService("RecommendationRequest", recommendation_request_repository)
dining_menu_item_service = CrudService("UCSBDiningCommonsMenuItem", dining_menu_item_repository)
ucsb_date_service = CrudService("UCSBDate", ucsb_date_repository)
