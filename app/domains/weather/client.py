# app/domains/weather/client.py

import logging
from typing import Optional
from urllib.parse import unquote

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

KMA_BASE_URL = "https://apis.data.go.kr/1360000/VilageFcstInfoService_2.0"
KMA_NOWCAST_URL = f"{KMA_BASE_URL}/getUltraSrtNcst"
KMA_FORECAST_URL = f"{KMA_BASE_URL}/getVilageFcst"


class KmaUpstreamError(Exception):
    """기상청 API가 2xx가 아니거나 JSON이 아닌 본문(XML 에러 등)을 돌려준 경우"""

    def __init__(self, status: int, status_text: str, content_type: str, body_snippet: str):
        super().__init__(f"KMA upstream error ({status} {status_text}): {body_snippet}")
        self.status = status
        self.status_text = status_text
        self.content_type = content_type
        self.body_snippet = body_snippet


class KmaResponseError(Exception):
    """응답 헤더의 resultCode가 '00'(정상)이 아닌 경우"""

    def __init__(self, result_code: str, result_msg: str):
        super().__init__(f"KMA response error ({result_code}): {result_msg}")
        self.result_code = result_code
        self.result_msg = result_msg


def clip_text(text: str, max_length: int = 300) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}…"


def as_list(value) -> list:
    # items.item은 배열, 단일 객체, 또는 누락일 수 있음
    if not value:
        return []
    return value if isinstance(value, list) else [value]


class KmaClient:
    def __init__(
        self,
        service_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        raw_key = settings.DATA_GO_KR_SERVICE_KEY if service_key is None else service_key
        # 인코딩된 키가 들어오면 디코딩해서 httpx가 한 번만 인코딩하도록 함
        self.service_key = unquote(raw_key.strip())
        self.transport = transport
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS

    async def fetch_nowcast(self, nx: int, ny: int, base_date: str, base_time: str) -> list:
        """초단기실황 항목 리스트 (category, obsrValue ...)"""
        return await self._request_items(KMA_NOWCAST_URL, nx, ny, base_date, base_time, rows=1000)

    async def fetch_forecast(self, nx: int, ny: int, base_date: str, base_time: str) -> list:
        """단기예보 항목 리스트 (category, fcstDate, fcstTime, fcstValue ...)"""
        return await self._request_items(KMA_FORECAST_URL, nx, ny, base_date, base_time, rows=2000)

    async def _request_items(self, url: str, nx: int, ny: int, base_date: str, base_time: str, rows: int) -> list:
        params = {
            "serviceKey": self.service_key,
            "pageNo": "1",
            "numOfRows": str(rows),
            "dataType": "JSON",
            "base_date": base_date,
            "base_time": base_time,
            "nx": str(nx),
            "ny": str(ny),
        }

        logger.info(f"📡 기상청 API 요청: {url.rsplit('/', 1)[-1]} {base_date} {base_time} (nx={nx}, ny={ny})")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.get(url, params=params)

        content_type = response.headers.get("content-type", "")
        raw_body = response.text

        if not response.is_success:
            logger.warning(f"❌ 기상청 API 상태 코드 에러: {response.status_code}")
            raise KmaUpstreamError(
                status=response.status_code,
                status_text=response.reason_phrase,
                content_type=content_type,
                body_snippet=clip_text(raw_body),
            )

        try:
            data = response.json()
        except ValueError:
            # 서비스키 오류 시 200 + XML 본문이 내려옴
            logger.warning("❌ 기상청 API 응답이 JSON이 아닙니다.")
            raise KmaUpstreamError(
                status=response.status_code,
                status_text=response.reason_phrase,
                content_type=content_type,
                body_snippet=clip_text(raw_body),
            )

        body = (data.get("response") or {}) if isinstance(data, dict) else {}
        header = body.get("header") or {}
        result_code = header.get("resultCode") or "UNKNOWN"
        result_msg = header.get("resultMsg") or "UNKNOWN"
        if result_code != "00":
            logger.warning(f"❌ 기상청 API 결과 에러: {result_code} {result_msg}")
            raise KmaResponseError(result_code, result_msg)

        items = ((body.get("body") or {}).get("items") or {})
        return as_list(items.get("item") if isinstance(items, dict) else None)
