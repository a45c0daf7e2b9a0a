"""District list normalisation and prefix-first search."""

from __future__ import annotations

from app.domains.district.data import KOREA_DISTRICTS
from app.domains.district.service import (
    build_district_index,
    district_to_geocode_query,
    find_district,
    get_district_index,
    normalize_district_text,
    search_districts,
    to_district_label,
)

SAMPLE = [
    "서울특별시-종로구",
    "서울특별시-종로구-사직동",
    "부산광역시-중구",
    "서울특별시-중구",
    "인천광역시-중구",
]


def test_normalize_strips_separators_and_case() -> None:
    assert normalize_district_text("서울특별시 종로구-사직동") == "서울특별시종로구사직동"
    assert normalize_district_text("ABC-d e") == "abcde"


def test_label_and_parts() -> None:
    entry = build_district_index(["서울특별시-종로구-사직동"])[0]

    assert entry.label == to_district_label(entry.raw) == "서울특별시 종로구 사직동"
    assert entry.parts == ("서울특별시", "종로구", "사직동")
    assert entry.search_text == "서울특별시종로구사직동"
    assert district_to_geocode_query(entry) == "서울특별시 종로구 사직동"


def test_empty_parts_are_dropped() -> None:
    assert build_district_index(["서울특별시--종로구"])[0].parts == ("서울특별시", "종로구")


def test_prefix_matches_come_before_substring_matches() -> None:
    index = build_district_index(SAMPLE + ["중구청앞"])

    results = search_districts(index, "중구")

    assert [e.raw for e in results] == ["중구청앞", "부산광역시-중구", "서울특별시-중구", "인천광역시-중구"]


def test_query_ignores_spaces_and_hyphens() -> None:
    index = build_district_index(SAMPLE)

    assert [e.raw for e in search_districts(index, "서울특별시 종로")] == ["서울특별시-종로구", "서울특별시-종로구-사직동"]
    assert [e.raw for e in search_districts(index, "종로구-사직")] == ["서울특별시-종로구-사직동"]


def test_blank_query_returns_nothing() -> None:
    index = build_district_index(SAMPLE)

    assert search_districts(index, "") == []
    assert search_districts(index, "  - ") == []


def test_limit_truncates_results() -> None:
    index = build_district_index(SAMPLE)

    assert len(search_districts(index, "구", limit=2)) == 2


def test_shipped_index() -> None:
    index = get_district_index()

    assert len(index) == len(KOREA_DISTRICTS)
    assert len(set(KOREA_DISTRICTS)) == len(KOREA_DISTRICTS)
    assert find_district("서울특별시-종로구").label == "서울특별시 종로구"
    assert find_district("없는시-없는구") is None
    assert search_districts(index, "해운대")[0].raw == "부산광역시-해운대구"
