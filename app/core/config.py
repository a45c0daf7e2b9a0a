# app/core/config.py

from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Korea Weather Dashboard"

    # 공공데이터포털 기상청 단기예보 서비스키 (Encoding/Decoding 키 모두 허용)
    DATA_GO_KR_SERVICE_KEY: str = ""

    # 카카오 로컬 API 키 (없으면 Nominatim만 사용)
    KAKAO_REST_API_KEY: str = ""

    # Nominatim 이용 정책상 식별 가능한 User-Agent 필수
    NOMINATIM_USER_AGENT: str = "korea-weather-dashboard"

    # 즐겨찾기 저장소
    DATABASE_URL: str = "sqlite+aiosqlite:///./weather_dashboard.db"

    HTTP_TIMEOUT_SECONDS: float = 10.0
    MAX_FAVORITES: int = 6

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
