"""Pydantic model for items served at a UCSB dining commons."""

from typing import Optional

from pydantic import BaseModel, Field

from .common import CAMEL_CASE_CONFIG


class UCSBDiningCommonsMenuItem(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: Optional[int] = None
    dining_commons_code: str = Field(..., examples=["ortega"])
    name: str = Field(..., examples=["Burger"])
    station: str = Field(..., examples=["entrees"])
