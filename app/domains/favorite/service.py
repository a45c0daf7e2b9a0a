# app/domains/favorite/service.py

import logging
import time
import uuid
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.domains.district.service import district_to_geocode_query, find_district
from app.domains.favorite.repository import FavoriteRepository
from app.domains.geocode.service import GeocodeService

logger = logging.getLogger(__name__)

ALIAS_MAX_LENGTH = 30

DUPLICATE_DETAIL = "이미 즐겨찾기에 추가된 장소입니다."


class FavoriteService:
    def __init__(self, max_favorites: Optional[int] = None):
        self.repo = FavoriteRepository()
        self.max_favorites = settings.MAX_FAVORITES if max_favorites is None else max_favorites

    def _limit_error(self) -> HTTPException:
        return HTTPException(
            status_code=409,
            detail=f"즐겨찾기는 최대 {self.max_favorites}개까지 추가할 수 있습니다.",
        )

    async def list_favorites(self, db: AsyncSession, client_id: str):
        return await self.repo.list_by_client(db, client_id)

    async def get_favorite(self, db: AsyncSession, client_id: str, favorite_id: str):
        favorite = await self.repo.get(db, client_id, favorite_id)
        if not favorite:
            raise HTTPException(status_code=404, detail="즐겨찾기를 찾을 수 없습니다.")
        return favorite

    async def add_from_district(self, db: AsyncSession, client_id: str, district_raw: str, geocoder: GeocodeService):
        """
        행정구역을 즐겨찾기에 추가합니다.
        중복/개수 제한을 먼저 확인하고, 통과하면 좌표를 조회해 저장합니다.
        좌표 조회 중 다른 요청이 먼저 저장한 경우에도 같은 409 로 응답합니다.
        """
        entry = find_district(district_raw)
        if entry is None:
            raise HTTPException(status_code=404, detail="존재하지 않는 행정구역입니다.")

        if await self.repo.exists_district(db, client_id, entry.raw):
            raise HTTPException(status_code=409, detail=DUPLICATE_DETAIL)

        if await self.repo.count(db, client_id) >= self.max_favorites:
            raise self._limit_error()

        coords = await geocoder.geocode_or_raise(district_to_geocode_query(entry))

        try:
            favorite = await self.repo.create(
                db,
                max_count=self.max_favorites,
                id=str(uuid.uuid4()),
                client_id=client_id,
                district_raw=entry.raw,
                label=entry.label,
                alias=entry.label,
                lat=coords.lat,
                lon=coords.lon,
                created_at=int(time.time() * 1000),
            )
        except IntegrityError:
            logger.warning(f"⚠️ 즐겨찾기 중복 저장 시도: client={client_id}, {entry.raw}")
            raise HTTPException(status_code=409, detail=DUPLICATE_DETAIL)

        if favorite is None:
            logger.warning(f"⚠️ 즐겨찾기 개수 초과 (동시 추가): client={client_id}")
            raise self._limit_error()

        logger.info(f"⭐ 즐겨찾기 추가: {entry.label} ({coords.provider})")
        return favorite

    async def update_alias(self, db: AsyncSession, client_id: str, favorite_id: str, alias: str):
        alias = alias.strip()
        if not alias:
            raise HTTPException(status_code=400, detail="별칭을 입력해주세요.")
        if len(alias) > ALIAS_MAX_LENGTH:
            raise HTTPException(status_code=400, detail=f"별칭은 최대 {ALIAS_MAX_LENGTH}자까지 입력할 수 있습니다.")

        favorite = await self.get_favorite(db, client_id, favorite_id)
        return await self.repo.update_alias(db, favorite, alias)

    async def remove(self, db: AsyncSession, client_id: str, favorite_id: str):
        favorite = await self.get_favorite(db, client_id, favorite_id)
        await self.repo.delete(db, favorite)
        logger.info(f"🗑️ 즐겨찾기 삭제: {favorite.label}")
        return {"ok": True}
