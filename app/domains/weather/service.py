# app/domains/weather/service.py

import asyncio
import logging
import math
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException

from app.domains.weather.client import KmaClient
from app.domains.weather.schemas import (
    BaseInfo, HourlyTemperature, Location, Nowcast, TodayRange, WeatherResponse,
)
from app.utils.kma_time import format_yyyymmdd, forecast_base, now_base, to_kst
from app.utils.location import map_to_grid

logger = logging.getLogger(__name__)

NO_PRECIPITATION = "강수없음"

PRECIPITATION_TYPES = {
    0: "없음",
    1: "비",
    2: "비/눈",
    3: "눈",
    4: "소나기",
}


def parse_number(value) -> Optional[float]:
    if value is None or value == "":
        return None
    if value == NO_PRECIPITATION:
        return 0.0
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    # NaN/inf 는 값이 없는 것으로 취급
    return parsed if math.isfinite(parsed) else None


def format_precipitation_type(value: Optional[float]) -> str:
    """PTY 코드 -> 표시용 문자열"""
    if value is None or not float(value).is_integer():
        return "-"
    return PRECIPITATION_TYPES.get(int(value), "-")


def has_any_nowcast(now: Nowcast) -> bool:
    return any(
        value is not None
        for value in (
            now.temperature_c,
            now.humidity,
            now.wind_speed,
            now.precipitation_1h,
            now.precipitation_type,
        )
    )


def build_nowcast(items: list) -> Nowcast:
    values = {}
    for item in items:
        values[item.get("category")] = item.get("obsrValue")

    precipitation_type = parse_number(values.get("PTY"))
    return Nowcast(
        temperature_c=parse_number(values.get("T1H")),
        humidity=parse_number(values.get("REH")),
        wind_speed=parse_number(values.get("WSD")),
        precipitation_1h=parse_number(values.get("RN1")),
        precipitation_type=precipitation_type,
        precipitation_type_label=format_precipitation_type(precipitation_type),
    )


def build_daily_forecast(items: list, today: str):
    """
    오늘(KST) 예보만 골라 최저/최고 기온과 시간별 기온을 만든다.
    같은 시각이 여러 번 나오면 정렬 후 첫 값만 사용한다.
    """
    min_c = None
    max_c = None
    hourly = []

    for item in items:
        if item.get("fcstDate") != today:
            continue
        category = item.get("category")
        if category == "TMN":
            min_c = parse_number(item.get("fcstValue"))
        elif category == "TMX":
            max_c = parse_number(item.get("fcstValue"))
        elif category == "TMP":
            temp = parse_number(item.get("fcstValue"))
            if temp is None:
                continue
            hourly.append((item.get("fcstTime") or "", temp))

    hourly.sort(key=lambda entry: entry[0])
    unique_hourly = []
    seen = set()
    for time, temp in hourly:
        if time in seen:
            continue
        seen.add(time)
        unique_hourly.append(HourlyTemperature(time=time, temperature_c=temp))

    return TodayRange(min_c=min_c, max_c=max_c), unique_hourly


class WeatherService:
    def __init__(self, client: Optional[KmaClient] = None):
        self.client = client or KmaClient()

    async def get_weather(self, lat: float, lon: float, now: Optional[datetime] = None) -> WeatherResponse:
        """
        좌표 -> 격자 변환 후 초단기실황과 단기예보를 동시에 조회해
        대시보드용 응답으로 재구성합니다.
        """
        if not self.client.service_key:
            raise HTTPException(status_code=500, detail="DATA_GO_KR_SERVICE_KEY가 설정되어 있지 않습니다.")

        # 비유한 좌표는 InvalidCoordinate 그대로 전파
        nx, ny = map_to_grid(lat, lon)
        logger.info(f"📍 격자 변환: ({lat}, {lon}) -> ({nx}, {ny})")

        now = now or datetime.now(timezone.utc)
        nowcast_base = now_base(now)
        fcst_base = forecast_base(now)

        nowcast_items, forecast_items = await asyncio.gather(
            self.client.fetch_nowcast(nx, ny, *nowcast_base),
            self.client.fetch_forecast(nx, ny, *fcst_base),
        )

        nowcast = build_nowcast(nowcast_items)
        if not has_any_nowcast(nowcast):
            # 해상 격자 등 관측값이 없는 지점
            logger.warning(f"⚠️ 초단기실황 값 없음: nx={nx}, ny={ny}, base={nowcast_base.base_date} {nowcast_base.base_time}")

        today, hourly = build_daily_forecast(forecast_items, format_yyyymmdd(to_kst(now)))

        return WeatherResponse(
            location=Location(lat=lat, lon=lon, nx=nx, ny=ny),
            base=BaseInfo(date=nowcast_base.base_date, time=nowcast_base.base_time),
            now=nowcast,
            today=today,
            hourly=hourly,
        )


def get_weather_service() -> WeatherService:
    return WeatherService()
