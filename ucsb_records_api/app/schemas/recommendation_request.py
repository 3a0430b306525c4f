"""
Pydantic model for recommendation requests.

A recommendation request tracks a student asking a professor for a
letter: who asked, whom they asked, why, when the request was made,
when the letter is needed and whether it has been written.  Dates are
local ISO-8601 timestamps without a zone offset
(e.g. ``2022-01-03T00:00:00``).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import CAMEL_CASE_CONFIG


class RecommendationRequest(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: Optional[int] = None
    requester_email: str = Field(..., examples=["cgaucho@ucsb.edu"])
    professor_email: str = Field(..., examples=["phtcon@ucsb.edu"])
    explanation: str = Field(..., examples=["BS/MS program"])
    date_requested: datetime = Field(..., examples=["2022-04-20T00:00:00"])
    date_needed: datetime = Field(..., examples=["2022-05-01T00:00:00"])
    done: bool = False
