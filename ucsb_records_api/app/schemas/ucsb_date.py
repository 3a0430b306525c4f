"""
Pydantic model for notable dates in the UCSB academic calendar.

``quarterYYYYQ`` identifies the quarter a date falls in: the year
followed by a quarter digit (1 = Winter, 2 = Spring, 3 = Summer,
4 = Fall), so ``20224`` is Fall 2022.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import CAMEL_CASE_CONFIG

QUARTER_PATTERN = r"^[0-9]{4}[1-4]$"


class UCSBDate(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: Optional[int] = None
    # to_camel would produce "quarterYyyyq"
    quarter_yyyyq: str = Field(..., alias="quarterYYYYQ", pattern=QUARTER_PATTERN, examples=["20221"])
    name: str = Field(..., examples=["Noon on January 3"])
    local_date_time: datetime = Field(..., examples=["2022-01-03T12:00:00"])
