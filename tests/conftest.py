"""Shared fixtures: isolated settings, per-test SQLite database, mocked KMA API."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from typing import Any

# Settings are read at import time, so the environment must be prepared
# before anything under ``app`` is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="weather-dashboard-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'app.db')}"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["DATA_GO_KR_SERVICE_KEY"] = "test-service-key"
os.environ["KAKAO_REST_API_KEY"] = ""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.core.database import Base, get_db
from app.domains.weather.client import KmaClient
from app.domains.weather.service import WeatherService, get_weather_service
from app.main import app

# 2026-01-15 13:05 KST
FIXED_NOW = datetime(2026, 1, 15, 4, 5, tzinfo=timezone.utc)
TODAY_KST = "20260115"


def nowcast_items() -> list[dict[str, Any]]:
    return [
        {"category": "T1H", "obsrValue": "3.2"},
        {"category": "REH", "obsrValue": "55"},
        {"category": "WSD", "obsrValue": "1.8"},
        {"category": "RN1", "obsrValue": "강수없음"},
        {"category": "PTY", "obsrValue": "0"},
    ]


def forecast_items() -> list[dict[str, Any]]:
    return [
        {"category": "TMP", "fcstDate": TODAY_KST, "fcstTime": "1500", "fcstValue": "5"},
        {"category": "TMP", "fcstDate": TODAY_KST, "fcstTime": "1400", "fcstValue": "4"},
        {"category": "TMP", "fcstDate": TODAY_KST, "fcstTime": "1400", "fcstValue": "99"},
        {"category": "TMN", "fcstDate": TODAY_KST, "fcstTime": "0600", "fcstValue": "-3.0"},
        {"category": "TMX", "fcstDate": TODAY_KST, "fcstTime": "1500", "fcstValue": "6.0"},
        {"category": "REH", "fcstDate": TODAY_KST, "fcstTime": "1400", "fcstValue": "40"},
        {"category": "TMP", "fcstDate": "20260116", "fcstTime": "0000", "fcstValue": "1"},
    ]


def kma_payload(items: Any, result_code: str = "00", result_msg: str = "NORMAL_SERVICE") -> dict[str, Any]:
    return {
        "response": {
            "header": {"resultCode": result_code, "resultMsg": result_msg},
            "body": {"dataType": "JSON", "items": {"item": items}},
        }
    }


def _fresh(response: httpx.Response) -> httpx.Response:
    # a canned response may be served many times
    return httpx.Response(response.status_code, headers=response.headers, content=response.content)


class KmaStub:
    """Routes getUltraSrtNcst / getVilageFcst to canned responses and records requests."""

    def __init__(self, nowcast: httpx.Response | None = None, forecast: httpx.Response | None = None) -> None:
        self.nowcast = nowcast or httpx.Response(200, json=kma_payload(nowcast_items()))
        self.forecast = forecast or httpx.Response(200, json=kma_payload(forecast_items()))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/getUltraSrtNcst"):
            return _fresh(self.nowcast)
        if request.url.path.endswith("/getVilageFcst"):
            return _fresh(self.forecast)
        return httpx.Response(404, text="unknown endpoint")

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def params_for(self, suffix: str) -> httpx.QueryParams:
        for request in self.requests:
            if request.url.path.endswith(suffix):
                return request.url.params
        raise AssertionError(f"no request to {suffix}")


class FixedClockWeatherService(WeatherService):
    async def get_weather(self, lat, lon, now=None):
        return await super().get_weather(lat, lon, now=now or FIXED_NOW)


@pytest.fixture
def kma_stub() -> KmaStub:
    return KmaStub()


@pytest.fixture
def use_weather_service(kma_stub: KmaStub):
    """Wire the API to a KMA client backed by ``kma_stub``."""

    def _install(service_key: str = "test-service-key", stub: KmaStub | None = None) -> None:
        transport = (stub or kma_stub).transport()
        service = FixedClockWeatherService(KmaClient(service_key=service_key, transport=transport))
        app.dependency_overrides[get_weather_service] = lambda: service

    _install()
    yield _install
    app.dependency_overrides.pop(get_weather_service, None)


@pytest.fixture
def client(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
