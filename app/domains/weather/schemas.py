# app/domains/weather/schemas.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    # 프론트엔드 계약은 camelCase (temperatureC, minC ...)
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Location(CamelModel):
    lat: float
    lon: float
    nx: int
    ny: int


class BaseInfo(CamelModel):
    date: str   # YYYYMMDD
    time: str   # HHMM


class Nowcast(CamelModel):
    temperature_c: Optional[float] = None      # T1H 기온
    humidity: Optional[float] = None           # REH 습도
    wind_speed: Optional[float] = None         # WSD 풍속
    precipitation_1h: Optional[float] = Field(None, alias="precipitation1h")  # RN1 1시간 강수량
    precipitation_type: Optional[float] = None  # PTY 강수형태 코드
    precipitation_type_label: str = "-"        # "없음", "비", "비/눈", "눈", "소나기"


class TodayRange(CamelModel):
    min_c: Optional[float] = None  # TMN
    max_c: Optional[float] = None  # TMX


class HourlyTemperature(CamelModel):
    time: str   # "1400"
    temperature_c: float


class WeatherResponse(CamelModel):
    ok: bool = True
    location: Location
    base: BaseInfo
    now: Nowcast
    today: TodayRange
    hourly: List[HourlyTemperature] = []
