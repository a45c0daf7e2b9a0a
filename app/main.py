# app/main.py
import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logger import setup_logging
from app.core.lifespan import lifespan
from app.middleware import APIAccessLoggerMiddleware
from app.utils.location import InvalidCoordinate
from app.domains.weather.client import KmaResponseError, KmaUpstreamError

# 라우터 임포트
from app.domains.weather.router import router as weather_router
from app.domains.geocode.router import router as geocode_router
from app.domains.district.router import router as district_router
from app.domains.favorite.router import router as favorite_router

# 로깅 설정 활성화
setup_logging()
logger = logging.getLogger("api_monitor")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="행정구역 검색, 현재 위치/지역 날씨, 즐겨찾기를 제공하는 날씨 대시보드 API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    APIAccessLoggerMiddleware,
)

app.include_router(geocode_router, prefix="/api/weather/geocode", tags=["Geocode"])
app.include_router(weather_router, prefix="/api/weather", tags=["Weather"])
app.include_router(district_router, prefix="/api/districts", tags=["District"])
app.include_router(favorite_router, prefix="/api/favorites", tags=["Favorites"])


@app.get("/")
def health_check():
    return {"ok": True, "message": f"{settings.PROJECT_NAME} is running"}


# ==========================================================
# 전역 에러 핸들러: 모든 실패 응답은 {"ok": false, "error": ...}
# ==========================================================

KMA_KEY_HINT = '공공데이터포털에서 발급받은 "Encoding" 서비스키를 사용했는지 확인해주세요.'


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message, **extra})


# 1. 예상치 못한 시스템 에러 (500)
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"🛑 [System Error] {request.url.path} : {exc}", exc_info=exc)
    return error_response(500, "서버 오류가 발생했습니다.")


# 2. 의도한 에러 (HTTPException)
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# 3. 데이터 형식이 틀렸을 때 (Validation Error)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error_details = exc.errors()
    logger.error(f"❌ VALIDATION_ERROR | {request.url.path} | Details: {error_details}")
    return JSONResponse(
        status_code=422,
        content={
            "ok": False,
            "error": "입력 값이 올바르지 않습니다.",
            "details": jsonable_errors(error_details),
        },
    )


def jsonable_errors(errors):
    # ctx 안의 예외 객체 등은 JSON 직렬화가 안 되므로 필요한 필드만 남김
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in errors
    ]


# 4. 좌표 오류 (위도/경도가 유한한 숫자가 아님)
@app.exception_handler(InvalidCoordinate)
async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinate):
    return error_response(400, "lat, lon 쿼리가 필요합니다. (예: ?lat=37.5665&lon=126.9780)")


# 5. 기상청 응답 resultCode 오류
@app.exception_handler(KmaResponseError)
async def kma_response_error_handler(request: Request, exc: KmaResponseError):
    return error_response(502, f"기상청 API 오류 ({exc.result_code}): {exc.result_msg}")


# 6. 기상청 HTTP 오류 / JSON 아닌 응답
@app.exception_handler(KmaUpstreamError)
async def kma_upstream_error_handler(request: Request, exc: KmaUpstreamError):
    return error_response(
        502,
        f"기상청 API 요청이 실패했습니다. ({exc.status} {exc.status_text})",
        hint=KMA_KEY_HINT,
        upstream={"contentType": exc.content_type, "body": exc.body_snippet},
    )
