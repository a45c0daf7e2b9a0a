# app/domains/geocode/nominatim_client.py

import logging
from typing import Optional

import httpx

from app.core.config import settings
from app.domains.geocode.kakao_client import first_document, parse_coordinate
from app.domains.geocode.schemas import GeocodeResult

logger = logging.getLogger(__name__)

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class NominatimClient:
    def __init__(
        self,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.user_agent = (user_agent or settings.NOMINATIM_USER_AGENT).strip()
        self.transport = transport
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS

    async def search(self, query: str) -> Optional[GeocodeResult]:
        params = {
            "format": "json",
            "limit": "1",
            "countrycodes": "kr",
            "q": query,
        }
        headers = {
            "User-Agent": self.user_agent,
            "Accept-Language": "ko",
        }

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.get(NOMINATIM_SEARCH_URL, params=params, headers=headers)

        if response.status_code != 200:
            logger.warning(f"❌ Nominatim 호출 실패 (Code: {response.status_code})")
            return None

        try:
            doc = first_document(response.json())
        except ValueError:
            return None
        if doc is None:
            return None

        lat = parse_coordinate(doc.get("lat"))
        lon = parse_coordinate(doc.get("lon"))
        if lat is None or lon is None:
            return None

        return GeocodeResult(query=query, provider="nominatim", lat=lat, lon=lon)
