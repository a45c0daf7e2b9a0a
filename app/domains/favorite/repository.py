# app/domains/favorite/repository.py

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.domains.favorite.models import Favorite

class FavoriteRepository:

    # [Read] 클라이언트의 즐겨찾기 목록 (최신순)
    async def list_by_client(self, db: AsyncSession, client_id: str):
        stmt = (
            select(Favorite)
            .where(Favorite.client_id == client_id)
            .order_by(Favorite.created_at.desc())
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    # [Read] ID로 찾기 (다른 클라이언트의 항목은 보이지 않음)
    async def get(self, db: AsyncSession, client_id: str, favorite_id: str):
        stmt = select(Favorite).where(
            Favorite.id == favorite_id,
            Favorite.client_id == client_id,
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self, db: AsyncSession, client_id: str) -> int:
        stmt = select(func.count()).select_from(Favorite).where(Favorite.client_id == client_id)
        result = await db.execute(stmt)
        return result.scalar_one()

    async def exists_district(self, db: AsyncSession, client_id: str, district_raw: str) -> bool:
        stmt = select(Favorite.id).where(
            Favorite.client_id == client_id,
            Favorite.district_raw == district_raw,
        )
        result = await db.execute(stmt)
        return result.first() is not None

    # [Create] max_count 를 넘으면 저장하지 않고 None
    # 중복 (client_id, district_raw) 는 롤백 후 IntegrityError 그대로 전파
    async def create(self, db: AsyncSession, max_count: Optional[int] = None, **fields):
        favorite = Favorite(**fields)
        db.add(favorite)
        try:
            await db.flush()
            # 같은 트랜잭션 안에서 다시 센다 (동시 추가 대비)
            if max_count is not None and await self.count(db, favorite.client_id) > max_count:
                await db.rollback()
                return None
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise
        await db.refresh(favorite)
        return favorite

    # [Update] 별칭 수정
    async def update_alias(self, db: AsyncSession, favorite: Favorite, alias: str):
        favorite.alias = alias
        await db.commit()
        await db.refresh(favorite)
        return favorite

    # [Delete]
    async def delete(self, db: AsyncSession, favorite: Favorite):
        await db.delete(favorite)
        await db.commit()
