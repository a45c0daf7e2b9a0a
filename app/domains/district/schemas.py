# app/domains/district/schemas.py

from pydantic import BaseModel
from typing import List


class DistrictItem(BaseModel):
    raw: str
    label: str
    parts: List[str]


class DistrictSearchResponse(BaseModel):
    ok: bool = True
    items: List[DistrictItem]
