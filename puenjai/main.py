# puenjai/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from puenjai.api import console, history
from puenjai.chains.persona_chain import configure_tracing
from puenjai.config import settings
from puenjai.schemas.commons_schemas import ErrorResponse
from puenjai.services.database_service import DatabaseService
from puenjai.services.reply_service import ReplyService
from puenjai.utils.logger import setup_logger

# 로거 설정
logger = setup_logger(settings.log_level)


class PreflightCORSMiddleware(CORSMiddleware):
    """모든 preflight에 빈 204 + CORS 헤더로 응답"""

    def preflight_response(self, request_headers) -> Response:
        return Response(status_code=204, headers=dict(self.preflight_headers))


def create_app(
    database_service: Optional[DatabaseService] = None,
    reply_service: Optional[ReplyService] = None,
) -> FastAPI:
    """앱 생성 - 서비스는 lifespan에서 만들고 종료시 정리"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(" Puen-Jai 서비스 시작")
        logger.info(f" Debug 모드: {settings.debug}")
        configure_tracing(settings)

        db = database_service or DatabaseService(settings.database_url, echo=settings.debug)
        await db.create_tables()
        logger.info("🗄️ 데이터베이스 초기화 완료")

        app.state.database_service = db
        app.state.reply_service = reply_service or ReplyService.from_settings(settings)

        try:
            yield
        finally:
            logger.info(" Puen-Jai 서비스 종료")
            await db.close()

    app = FastAPI(
        title="Puen-Jai Heart Console",
        description="상심한 사람을 위한 AI 위로 대화 서비스",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS 설정
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # 경로 불일치 / 메서드 불일치는 모두 404
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=ErrorResponse(error="Endpoint not found").model_dump())
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content=ErrorResponse(error="Invalid JSON body").model_dump())

    # 라우터 등록
    app.include_router(console.router, prefix="/api")
    app.include_router(history.router, prefix="/api")

    @app.options("/{full_path:path}", include_in_schema=False)
    async def preflight(full_path: str):
        return Response(status_code=204)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "puenjai.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
