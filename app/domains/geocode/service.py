# app/domains/geocode/service.py

import logging
from typing import Optional

from fastapi import HTTPException

from app.domains.geocode.kakao_client import KakaoClient
from app.domains.geocode.nominatim_client import NominatimClient
from app.domains.geocode.schemas import GeocodeResult

logger = logging.getLogger(__name__)


class GeocodeService:
    def __init__(self, kakao: Optional[KakaoClient] = None, nominatim: Optional[NominatimClient] = None):
        self.kakao = kakao or KakaoClient()
        self.nominatim = nominatim or NominatimClient()

    async def geocode(self, query: str) -> Optional[GeocodeResult]:
        """카카오 -> Nominatim 순으로 좌표를 찾습니다. 못 찾으면 None."""
        result = await self.kakao.search(query)
        if result:
            return result
        return await self.nominatim.search(query)

    async def geocode_or_raise(self, query: str) -> GeocodeResult:
        try:
            result = await self.geocode(query)
        except Exception as e:
            # 통신 오류 포함, 조회 중 실패는 모두 500
            logger.error(f"❌ geocode 오류: {query} ({type(e).__name__})", exc_info=True)
            raise HTTPException(status_code=500, detail="geocode 처리 중 오류가 발생했습니다.")

        if result is None:
            raise HTTPException(status_code=404, detail="해당 장소의 좌표를 찾을 수 없습니다.")
        return result


def get_geocode_service() -> GeocodeService:
    return GeocodeService()
