# app/domains/favorite/schemas.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List

from app.domains.weather.schemas import WeatherResponse

#
#=============입력================
#
class FavoriteCreate(BaseModel):
    district: str = Field(..., min_length=1)  # 행정구역 raw 값 ("서울특별시-종로구")

class FavoriteAliasUpdate(BaseModel):
    alias: str = Field(..., min_length=1)  # 공백 제거 후 길이는 서비스에서 검사

#
# ============출력===============
#
class Coords(BaseModel):
    lat: float
    lon: float

class FavoriteResponse(BaseModel):
    id: str
    district_raw: str
    label: str
    alias: str
    coords: Coords
    created_at: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_model(cls, favorite) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            district_raw=favorite.district_raw,
            label=favorite.label,
            alias=favorite.alias,
            coords=Coords(lat=favorite.lat, lon=favorite.lon),
            created_at=favorite.created_at,
        )

class FavoriteListResponse(BaseModel):
    ok: bool = True
    items: List[FavoriteResponse]
    count: int
    can_add: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class FavoriteWeatherResponse(WeatherResponse):
    favorite: FavoriteResponse
