# wonderland/main.py
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError
import uvicorn

from wonderland import __version__
from wonderland.api import auth, gallery, music, stats, timeline, todos, wishes
from wonderland.config import Settings
from wonderland.context import build_context
from wonderland.exceptions import AppError
from wonderland.services.seed_service import seed_sample_data
from wonderland.transformers import outputs
from wonderland.transformers.primitives import to_iso
from wonderland.utils.logger import setup_logger


def _register_exception_handlers(app: FastAPI, settings: Settings, logger):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f" {request.method} {request.url.path} 실패: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=outputs.error(exc.message, exc.details))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=400, content=outputs.error("Invalid request", details))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f" 제약 조건 위반: {request.url.path}")
        return JSONResponse(status_code=409, content=outputs.error("Resource already exists"))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        # 개발 모드에서만 내부 메시지 노출
        logger.exception(f" 처리되지 않은 오류: {request.method} {request.url.path}")
        details = str(exc) if settings.environment == "development" else None
        return JSONResponse(status_code=500, content=outputs.error("Internal server error", details))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    # 로거 설정
    logger = setup_logger(settings.log_level)

    context = build_context(settings)
    context.uploads.ensure_dir()

    app = FastAPI(
        title="Christmas Wonderland API",
        description="소원 벽 · 할 일 · 타임라인 · 갤러리 · 플레이리스트 · 방문 통계",
        version=__version__,
        debug=settings.debug,
    )
    app.state.context = context

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app, settings, logger)

    @app.on_event("startup")
    async def startup_event():
        """앱 시작시 초기화"""
        logger.info("🎄 Christmas Wonderland API 시작")
        logger.info(f" 환경: {settings.environment}, Debug 모드: {settings.debug}")

        await context.database.create_tables()
        if settings.seed_sample_data:
            async with context.database.session() as session:
                await seed_sample_data(session)
        logger.info("🗄️ 데이터베이스 초기화 완료")

    @app.on_event("shutdown")
    async def shutdown_event():
        """앱 종료시 정리"""
        logger.info(" Christmas Wonderland API 종료")
        await context.database.close()

    # 라우터 등록
    app.include_router(auth.router, prefix="/api")
    app.include_router(wishes.router, prefix="/api")
    app.include_router(todos.router, prefix="/api")
    app.include_router(timeline.router, prefix="/api")
    app.include_router(gallery.router, prefix="/api")
    app.include_router(music.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "timestamp": to_iso(datetime.now(timezone.utc))}

    # 업로드 파일 서빙
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

    return app


if __name__ == "__main__":
    _settings = Settings()
    uvicorn.run(
        "wonderland.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=_settings.debug,
        log_level=_settings.log_level.lower(),
    )
