# app/middleware.py
import time
import logging
import json
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("api_monitor")

class APIAccessLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path
        query = request.url.query or None
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)

            duration = time.time() - start_time

            # 400번대 이상 (잘못된 좌표, 기상청 장애 등)
            if response.status_code >= 400:
                error_log = {
                    "event": "HTTP_ERROR",
                    "status": response.status_code,
                    "method": method,
                    "path": path,
                    "query": query,
                    "client": client_ip,
                    "duration": f"{duration:.4f}s"
                }
                logger.warning(json.dumps(error_log, ensure_ascii=False))
            else:
                logger.info(f"SUCCESS | {method} {path} | Time: {duration:.4f}s")

            return response

        except Exception as e:
            duration = time.time() - start_time

            critical_log = {
                "event": "SYSTEM_CRITICAL_ERROR",
                "method": method,
                "path": path,
                "query": query,
                "client": client_ip,
                "error_type": type(e).__name__,
                "error_message": str(e),
                "duration": f"{duration:.4f}s"
            }
            logger.error(json.dumps(critical_log, ensure_ascii=False), exc_info=True)

            # 예외를 다시 raise하지 않고 500 응답으로 종결 (Uvicorn 중복 로그 방지)
            return JSONResponse(
                status_code=500,
                content={"ok": False, "error": "서버 오류가 발생했습니다."}
            )
