"""HTTP contract of the dashboard API: envelopes, status codes and favorites flow."""

from __future__ import annotations

import time
from typing import Any

import httpx
import pytest

from app.domains.geocode.kakao_client import KakaoClient
from app.domains.geocode.nominatim_client import NominatimClient
from app.domains.geocode.service import GeocodeService, get_geocode_service
from app.domains.weather.service import get_weather_service
from app.main import app
from conftest import KmaStub, kma_payload


@pytest.fixture
def geocode_hits() -> list[httpx.Request]:
    """Nominatim answers Seoul City Hall for every query; returns the request log."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"lat": "37.5665", "lon": "126.9780"}])

    service = GeocodeService(
        kakao=KakaoClient(api_key=""),
        nominatim=NominatimClient(transport=httpx.MockTransport(handler)),
    )
    app.dependency_overrides[get_geocode_service] = lambda: service
    yield seen
    app.dependency_overrides.pop(get_geocode_service, None)


def _use_geocoder(handler) -> None:
    service = GeocodeService(kakao=KakaoClient(api_key=""), nominatim=NominatimClient(transport=httpx.MockTransport(handler)))
    app.dependency_overrides[get_geocode_service] = lambda: service


def test_health_check(client) -> None:
    assert client.get("/").json()["ok"] is True


# ---------------------------------------------------------------- weather


def test_weather_success(client, use_weather_service, kma_stub) -> None:
    response = client.get("/api/weather", params={"lat": "37.5665", "lon": "126.9780"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["location"] == {"lat": 37.5665, "lon": 126.978, "nx": 60, "ny": 127}
    assert body["base"] == {"date": "20260115", "time": "1200"}
    assert body["now"]["temperatureC"] == 3.2
    assert body["now"]["precipitation1h"] == 0.0
    assert body["today"] == {"minC": -3.0, "maxC": 6.0}
    assert body["hourly"] == [{"time": "1400", "temperatureC": 4.0}, {"time": "1500", "temperatureC": 5.0}]
    assert response.headers["Cache-Control"].startswith("max-age=")
    assert len(kma_stub.requests) == 2


@pytest.mark.parametrize(
    "params",
    [{}, {"lat": "37.5"}, {"lat": "abc", "lon": "127"}, {"lat": "nan", "lon": "127"}, {"lat": "37", "lon": "Infinity"}],
)
def test_weather_rejects_bad_coordinates(client, use_weather_service, kma_stub, params: dict[str, Any]) -> None:
    response = client.get("/api/weather", params=params)

    assert response.status_code == 400
    assert response.json() == {
        "ok": False,
        "error": "lat, lon 쿼리가 필요합니다. (예: ?lat=37.5665&lon=126.9780)",
    }
    assert kma_stub.requests == []


def test_weather_without_service_key(client, use_weather_service) -> None:
    use_weather_service(service_key="")

    response = client.get("/api/weather", params={"lat": "37.5665", "lon": "126.9780"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "DATA_GO_KR_SERVICE_KEY가 설정되어 있지 않습니다."}


def test_weather_result_code_error_maps_to_502(client, use_weather_service) -> None:
    stub = KmaStub(nowcast=httpx.Response(200, json=kma_payload([], "30", "SERVICE_KEY_IS_NOT_REGISTERED_ERROR")))
    use_weather_service(stub=stub)

    response = client.get("/api/weather", params={"lat": "37.5665", "lon": "126.9780"})

    assert response.status_code == 502
    assert response.json() == {
        "ok": False,
        "error": "기상청 API 오류 (30): SERVICE_KEY_IS_NOT_REGISTERED_ERROR",
    }


def test_weather_upstream_failure_includes_hint(client, use_weather_service) -> None:
    stub = KmaStub(forecast=httpx.Response(503, text="maintenance", headers={"content-type": "text/plain"}))
    use_weather_service(stub=stub)

    response = client.get("/api/weather", params={"lat": "37.5665", "lon": "126.9780"})

    assert response.status_code == 502
    body = response.json()
    assert body["ok"] is False
    assert body["error"] == "기상청 API 요청이 실패했습니다. (503 Service Unavailable)"
    assert "Encoding" in body["hint"]
    assert body["upstream"] == {"contentType": "text/plain", "body": "maintenance"}


def test_unexpected_error_becomes_500_envelope(client) -> None:
    class Broken:
        async def get_weather(self, lat, lon, now=None):
            raise RuntimeError("boom")

    app.dependency_overrides[get_weather_service] = lambda: Broken()

    response = client.get("/api/weather", params={"lat": "37.5665", "lon": "126.9780"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "서버 오류가 발생했습니다."}


# ---------------------------------------------------------------- geocode


def test_geocode_success(client, geocode_hits) -> None:
    response = client.get("/api/weather/geocode", params={"q": "  종로구 "})

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "query": "종로구",
        "provider": "nominatim",
        "lat": 37.5665,
        "lon": 126.978,
    }
    assert geocode_hits[0].url.params["q"] == "종로구"


def test_geocode_requires_query(client, geocode_hits) -> None:
    response = client.get("/api/weather/geocode", params={"q": "   "})

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "q 파라미터가 필요합니다. (예: ?q=종로구)"}
    assert geocode_hits == []


def test_geocode_not_found(client) -> None:
    _use_geocoder(lambda request: httpx.Response(200, json=[]))

    response = client.get("/api/weather/geocode", params={"q": "없는곳"})

    assert response.status_code == 404
    assert response.json()["error"] == "해당 장소의 좌표를 찾을 수 없습니다."


def test_geocode_upstream_failure(client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _use_geocoder(handler)

    response = client.get("/api/weather/geocode", params={"q": "종로구"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "geocode 처리 중 오류가 발생했습니다."}


# ---------------------------------------------------------------- districts


def test_district_search(client) -> None:
    response = client.get("/api/districts", params={"q": "종로", "limit": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert len(body["items"]) == 3
    assert body["items"][0] == {
        "raw": "서울특별시-종로구",
        "label": "서울특별시 종로구",
        "parts": ["서울특별시", "종로구"],
    }


def test_district_search_validates_limit(client) -> None:
    response = client.get("/api/districts", params={"q": "종로", "limit": 0})

    assert response.status_code == 422
    body = response.json()
    assert body["ok"] is False
    assert body["details"][0]["loc"] == ["query", "limit"]


# ---------------------------------------------------------------- favorites


def _add(client, district: str, client_id: str = "browser-a"):
    return client.post("/api/favorites", json={"district": district}, headers={"X-Client-Id": client_id})


def test_add_and_list_favorites(client, geocode_hits) -> None:
    first = _add(client, "서울특별시-종로구")
    time.sleep(0.01)
    second = _add(client, "부산광역시-해운대구")

    assert first.status_code == 201
    created = first.json()
    assert created["districtRaw"] == "서울특별시-종로구"
    assert created["label"] == created["alias"] == "서울특별시 종로구"
    assert created["coords"] == {"lat": 37.5665, "lon": 126.978}
    assert isinstance(created["createdAt"], int)
    assert geocode_hits[0].url.params["q"] == "서울특별시 종로구"

    listing = client.get("/api/favorites", headers={"X-Client-Id": "browser-a"}).json()
    assert listing["ok"] is True
    assert listing["count"] == 2
    assert listing["canAdd"] is True
    assert [item["id"] for item in listing["items"]] == [second.json()["id"], created["id"]]


def test_favorites_are_scoped_per_client(client, geocode_hits) -> None:
    favorite_id = _add(client, "서울특별시-종로구", client_id="browser-a").json()["id"]

    other = client.get("/api/favorites", headers={"X-Client-Id": "browser-b"}).json()
    assert other["items"] == []

    response = client.delete(f"/api/favorites/{favorite_id}", headers={"X-Client-Id": "browser-b"})
    assert response.status_code == 404


def test_duplicate_favorite_is_rejected(client, geocode_hits) -> None:
    _add(client, "서울특별시-종로구")

    response = _add(client, "서울특별시-종로구")

    assert response.status_code == 409
    assert response.json() == {"ok": False, "error": "이미 즐겨찾기에 추가된 장소입니다."}
    assert len(geocode_hits) == 1


def test_favorite_limit(client, geocode_hits) -> None:
    districts = [
        "서울특별시-종로구",
        "서울특별시-중구",
        "부산광역시-중구",
        "대구광역시-중구",
        "인천광역시-중구",
        "광주광역시-동구",
    ]
    for district in districts:
        assert _add(client, district).status_code == 201

    response = _add(client, "대전광역시-중구")

    assert response.status_code == 409
    assert response.json()["error"] == "즐겨찾기는 최대 6개까지 추가할 수 있습니다."
    listing = client.get("/api/favorites", headers={"X-Client-Id": "browser-a"}).json()
    assert listing["count"] == 6
    assert listing["canAdd"] is False


def test_unknown_district_is_rejected(client, geocode_hits) -> None:
    response = _add(client, "없는시-없는구")

    assert response.status_code == 404
    assert geocode_hits == []


def test_favorite_not_geocodable(client) -> None:
    _use_geocoder(lambda request: httpx.Response(200, json=[]))

    response = _add(client, "서울특별시-종로구")

    assert response.status_code == 404
    assert client.get("/api/favorites", headers={"X-Client-Id": "browser-a"}).json()["count"] == 0


def test_update_alias(client, geocode_hits) -> None:
    favorite_id = _add(client, "서울특별시-종로구").json()["id"]
    headers = {"X-Client-Id": "browser-a"}

    response = client.patch(f"/api/favorites/{favorite_id}", json={"alias": "  회사 "}, headers=headers)
    assert response.status_code == 200
    assert response.json()["alias"] == "회사"

    blank = client.patch(f"/api/favorites/{favorite_id}", json={"alias": "   "}, headers=headers)
    assert blank.status_code == 400

    padded = client.patch(f"/api/favorites/{favorite_id}", json={"alias": " " + "가" * 30 + " "}, headers=headers)
    assert padded.status_code == 200
    assert padded.json()["alias"] == "가" * 30

    too_long = client.patch(f"/api/favorites/{favorite_id}", json={"alias": "가" * 31}, headers=headers)
    assert too_long.status_code == 400
    assert too_long.json() == {"ok": False, "error": "별칭은 최대 30자까지 입력할 수 있습니다."}

    missing = client.patch("/api/favorites/does-not-exist", json={"alias": "집"}, headers=headers)
    assert missing.status_code == 404
    assert missing.json() == {"ok": False, "error": "즐겨찾기를 찾을 수 없습니다."}


def test_remove_favorite(client, geocode_hits) -> None:
    favorite_id = _add(client, "서울특별시-종로구").json()["id"]
    headers = {"X-Client-Id": "browser-a"}

    assert client.delete(f"/api/favorites/{favorite_id}", headers=headers).json() == {"ok": True}
    assert client.delete(f"/api/favorites/{favorite_id}", headers=headers).status_code == 404
    assert client.get("/api/favorites", headers=headers).json()["count"] == 0


def test_favorite_weather(client, geocode_hits, use_weather_service) -> None:
    favorite = _add(client, "서울특별시-종로구").json()

    response = client.get(f"/api/favorites/{favorite['id']}/weather", headers={"X-Client-Id": "browser-a"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["favorite"]["id"] == favorite["id"]
    assert (body["location"]["nx"], body["location"]["ny"]) == (60, 127)
    assert body["now"]["humidity"] == 55.0
    assert response.headers["Cache-Control"].startswith("max-age=")


def test_default_client_id(client, geocode_hits) -> None:
    assert client.post("/api/favorites", json={"district": "서울특별시-종로구"}).status_code == 201

    listing = client.get("/api/favorites", headers={"X-Client-Id": "anonymous"}).json()
    assert listing["count"] == 1
