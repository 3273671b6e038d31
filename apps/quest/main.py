"""Quest Service Application.

퀘스트 제출 평가 서비스 (접근 조건 → 채점 → moderation → 완료 기록).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.quest.metrics import register_metrics
from apps.quest.presentation.http.controllers import health, quest
from apps.quest.presentation.http.errors import register_exception_handlers
from apps.quest.setup.config import get_settings
from apps.quest.setup.dependencies import cleanup
from apps.quest.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "Quest service starting",
        extra={
            "environment": settings.environment,
            "ledger_backend": settings.ledger_backend,
            "moderation_backend": settings.moderation_backend,
        },
    )

    yield

    logger.info("Quest service shutting down")
    await cleanup()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    app = FastAPI(
        title="Quest API",
        description="퀘스트 제출 검증 및 채점 서비스",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(quest.router, prefix="/api/v1")

    register_metrics(app)

    return app


# Uvicorn entrypoint
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.quest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
