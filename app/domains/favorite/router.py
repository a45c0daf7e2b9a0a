# app/domains/favorite/router.py

from fastapi import APIRouter, Depends, Header, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.domains.favorite.schemas import (
    FavoriteAliasUpdate, FavoriteCreate, FavoriteListResponse,
    FavoriteResponse, FavoriteWeatherResponse,
)
from app.domains.favorite.service import FavoriteService
from app.domains.geocode.service import GeocodeService, get_geocode_service
from app.domains.weather.router import set_cache_headers
from app.domains.weather.service import WeatherService, get_weather_service

router = APIRouter()
service = FavoriteService()


# 브라우저별 즐겨찾기 구분용 (로그인 없음)
async def get_client_id(x_client_id: str = Header("anonymous", max_length=64)) -> str:
    return x_client_id.strip() or "anonymous"


# 1. 즐겨찾기 목록
@router.get("", response_model=FavoriteListResponse)
async def list_favorites(
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
):
    items = await service.list_favorites(db, client_id)
    return FavoriteListResponse(
        items=[FavoriteResponse.from_model(f) for f in items],
        count=len(items),
        can_add=len(items) < service.max_favorites,
    )


# 2. 행정구역으로 추가
@router.post("", response_model=FavoriteResponse, status_code=201)
async def add_favorite(
    data: FavoriteCreate,
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
    geocoder: GeocodeService = Depends(get_geocode_service),
):
    favorite = await service.add_from_district(db, client_id, data.district, geocoder)
    return FavoriteResponse.from_model(favorite)


# 3. 별칭 수정
@router.patch("/{favorite_id}", response_model=FavoriteResponse)
async def update_alias(
    favorite_id: str,
    data: FavoriteAliasUpdate,
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
):
    favorite = await service.update_alias(db, client_id, favorite_id, data.alias)
    return FavoriteResponse.from_model(favorite)


# 4. 삭제
@router.delete("/{favorite_id}")
async def remove_favorite(
    favorite_id: str,
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
):
    return await service.remove(db, client_id, favorite_id)


# 5. 즐겨찾기 장소의 날씨 (상세 페이지)
@router.get("/{favorite_id}/weather", response_model=FavoriteWeatherResponse)
async def get_favorite_weather(
    favorite_id: str,
    response: Response,
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
    weather: WeatherService = Depends(get_weather_service),
):
    favorite = await service.get_favorite(db, client_id, favorite_id)
    result = await weather.get_weather(favorite.lat, favorite.lon)
    set_cache_headers(response)
    return FavoriteWeatherResponse(
        **result.model_dump(),
        favorite=FavoriteResponse.from_model(favorite),
    )
