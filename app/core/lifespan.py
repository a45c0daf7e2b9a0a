# app/core/lifespan.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.core.database import engine, Base

# 테이블 생성을 위해 모델을 미리 메모리에 로드
from app.domains.favorite.models import Favorite  # noqa: F401

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup] DB 테이블 자동 생성 (없을 때만)
    logger.info("🚀 [System] 서버 시작: 즐겨찾기 테이블 확인")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ [Database] 테이블 체크 및 생성 완료")

    yield

    # [Shutdown] DB 커넥션 종료
    logger.info("🛑 서버 종료: DB 커넥션을 정리합니다.")
    await engine.dispose()
