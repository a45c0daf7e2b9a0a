# app/domains/district/router.py

from fastapi import APIRouter, Query

from app.domains.district.schemas import DistrictItem, DistrictSearchResponse
from app.domains.district.service import get_district_index, search_districts

router = APIRouter()


@router.get("", response_model=DistrictSearchResponse)
async def search(q: str = "", limit: int = Query(8, ge=1, le=50)):
    """[행정구역 검색] 하이픈/공백 무시, 접두 일치 우선"""
    entries = search_districts(get_district_index(), q, limit)
    return DistrictSearchResponse(
        items=[DistrictItem(raw=e.raw, label=e.label, parts=list(e.parts)) for e in entries]
    )
