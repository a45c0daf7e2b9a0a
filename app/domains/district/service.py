# app/domains/district/service.py

from functools import lru_cache
from typing import Iterable, List, NamedTuple, Optional, Tuple

from app.domains.district.data import KOREA_DISTRICTS


class DistrictEntry(NamedTuple):
    raw: str                 # "서울특별시-종로구-청운효자동"
    label: str               # "서울특별시 종로구 청운효자동"
    search_text: str         # "서울특별시종로구청운효자동"
    parts: Tuple[str, ...]   # ("서울특별시", "종로구", "청운효자동")


def normalize_district_text(text: str) -> str:
    return text.replace("-", "").replace(" ", "").lower()


def to_district_label(raw: str) -> str:
    return raw.replace("-", " ")


def build_district_index(districts: Iterable[str]) -> List[DistrictEntry]:
    return [
        DistrictEntry(
            raw=raw,
            label=to_district_label(raw),
            search_text=normalize_district_text(raw),
            parts=tuple(part for part in raw.split("-") if part),
        )
        for raw in districts
    ]


def search_districts(index: List[DistrictEntry], query: str, limit: int = 8) -> List[DistrictEntry]:
    """
    접두 일치 항목을 먼저, 부분 일치 항목을 그 뒤에 붙여 최대 limit개 반환.
    각 그룹 안에서는 목록 순서를 유지한다.
    """
    normalized = normalize_district_text(query.strip())
    if not normalized:
        return []

    starts_with = []
    includes = []
    for entry in index:
        if entry.search_text.startswith(normalized):
            starts_with.append(entry)
        elif normalized in entry.search_text:
            includes.append(entry)

    return (starts_with + includes)[:limit]


def district_to_geocode_query(entry: DistrictEntry) -> str:
    return " ".join(entry.parts)


@lru_cache(maxsize=1)
def get_district_index() -> List[DistrictEntry]:
    return build_district_index(KOREA_DISTRICTS)


def find_district(raw: str) -> Optional[DistrictEntry]:
    for entry in get_district_index():
        if entry.raw == raw:
            return entry
    return None
