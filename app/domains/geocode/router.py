# app/domains/geocode/router.py

from fastapi import APIRouter, Depends, HTTPException

from app.domains.geocode.schemas import GeocodeResponse
from app.domains.geocode.service import GeocodeService, get_geocode_service

router = APIRouter()


@router.get("", response_model=GeocodeResponse)
async def geocode(
    q: str = "",
    service: GeocodeService = Depends(get_geocode_service),
):
    """[장소명 -> 좌표] 카카오 주소/키워드 검색, 실패 시 Nominatim"""
    query = q.strip()
    if not query:
        raise HTTPException(status_code=400, detail="q 파라미터가 필요합니다. (예: ?q=종로구)")

    result = await service.geocode_or_raise(query)
    return GeocodeResponse(**result.model_dump())
