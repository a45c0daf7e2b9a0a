# app/domains/geocode/kakao_client.py

import logging
import math
from typing import Optional

import httpx

from app.core.config import settings
from app.domains.geocode.schemas import GeocodeResult

logger = logging.getLogger(__name__)

KAKAO_ADDRESS_URL = "https://dapi.kakao.com/v2/local/search/address.json"
KAKAO_KEYWORD_URL = "https://dapi.kakao.com/v2/local/search/keyword.json"


def parse_coordinate(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def first_document(payload, key: str = "documents"):
    if isinstance(payload, dict):
        docs = payload.get(key)
    else:
        docs = payload
    if isinstance(docs, list) and docs and isinstance(docs[0], dict):
        return docs[0]
    return None


class KakaoClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = (settings.KAKAO_REST_API_KEY if api_key is None else api_key).strip()
        self.transport = transport
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str) -> Optional[GeocodeResult]:
        """
        주소 검색을 먼저 시도하고, 결과가 없으면 키워드(장소명) 검색으로 넘어갑니다.
        """
        if not self.enabled:
            return None

        headers = {"Authorization": f"KakaoAK {self.api_key}"}
        params = {"query": query, "size": "1"}

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout, headers=headers) as client:
            for url, provider in ((KAKAO_ADDRESS_URL, "kakao-address"), (KAKAO_KEYWORD_URL, "kakao-keyword")):
                response = await client.get(url, params=params)

                # 실패 시 다음 단계로 넘어감 (키 오류, 쿼터 초과 등)
                if response.status_code != 200:
                    logger.warning(f"❌ 카카오 API 호출 실패 ({provider}, Code: {response.status_code})")
                    continue

                try:
                    doc = first_document(response.json())
                except ValueError:
                    doc = None
                if doc is None:
                    continue

                lon = parse_coordinate(doc.get("x"))
                lat = parse_coordinate(doc.get("y"))
                if lat is not None and lon is not None:
                    logger.info(f"📍 주소 변환 성공: {query} -> ({lat}, {lon}) [{provider}]")
                    return GeocodeResult(query=query, provider=provider, lat=lat, lon=lon)

        logger.info(f"⚠️ 카카오 검색 결과 없음: {query}")
        return None
