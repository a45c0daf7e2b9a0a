# app/domains/geocode/schemas.py

from pydantic import BaseModel
from typing import Literal

Provider = Literal["kakao-address", "kakao-keyword", "nominatim"]


class GeocodeResult(BaseModel):
    query: str
    provider: Provider
    lat: float
    lon: float


class GeocodeResponse(GeocodeResult):
    ok: bool = True
