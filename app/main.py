from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.api import api_router
from app.core.config import settings

logger = logging.getLogger(__name__)

# 프레임워크 기본 메시지(Starlette 기본 detail) 대신 내려줄 문구
# provider 에러처럼 detail을 직접 채운 예외는 그대로 둠
_FRAMEWORK_MESSAGES = {
    (405, "Method Not Allowed"): "Method not allowed",
}


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if isinstance(exc.detail, str):
        message = _FRAMEWORK_MESSAGES.get((exc.status_code, exc.detail), message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # 스택트레이스는 서버 로그에만
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# FastAPI 앱을 생성하고(title/version 설정), 라우터를 붙이고,
# /health를 추가한 뒤, uvicorn이 인식할 app 객체를 노출
def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="ai-review-generator", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
    app.include_router(api_router)

    @app.get("/health")
    def health():
        return {"status": "OK"}

    return app


app = create_app()
