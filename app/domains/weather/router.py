# app/domains/weather/router.py

from typing import Optional
from fastapi import APIRouter, Depends, Response

from app.domains.weather.schemas import WeatherResponse
from app.domains.weather.service import WeatherService, get_weather_service
from app.utils.kma_time import seconds_until_next_hour_kst

router = APIRouter()


def parse_coordinate(value: Optional[str]) -> float:
    # 누락/문자열 입력은 NaN으로 넘겨 격자 변환에서 InvalidCoordinate 처리
    if value is None:
        return float("nan")
    try:
        return float(value)
    except ValueError:
        return float("nan")


def set_cache_headers(response: Response):
    # 다음 정시에 새 실황이 나오므로 그때까지 브라우저 캐시 허용
    response.headers["Cache-Control"] = f"max-age={seconds_until_next_hour_kst()}"


@router.get("", response_model=WeatherResponse)
async def get_weather(
    response: Response,
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    service: WeatherService = Depends(get_weather_service),
):
    """
    [현재 날씨 조회]
    1. 초단기실황 (기온, 습도, 풍속, 강수)
    2. 오늘 최저/최고 기온과 시간별 기온
    """
    result = await service.get_weather(parse_coordinate(lat), parse_coordinate(lon))
    set_cache_headers(response)
    return result
