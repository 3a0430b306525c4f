"""
Pydantic schema definitions for API payloads.

Each entity kind defines one model used for request bodies, responses
and storage alike; ``id`` is ``None`` until the record store assigns
one.
"""

from .commit import Commit
from .common import ErrorBody, Message
from .dining_menu_item import UCSBDiningCommonsMenuItem
from .recommendation_request import RecommendationRequest
from .ucsb_date import UCSBDate

__all__ = [
    "Commit",
    "ErrorBody",
    "Message",
    "RecommendationRequest",
    "UCSBDate",
    "UCSBDiningCommonsMenuItem",
]
