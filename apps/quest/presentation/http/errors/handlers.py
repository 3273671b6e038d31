"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.quest.application.quest.exceptions import ModerationUnavailableError
from apps.quest.domain.exceptions import QuestServiceError, UnsupportedOperatorError
from apps.quest.metrics import QUEST_MODERATION_FAILURES


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UnsupportedOperatorError)
    async def unsupported_operator_handler(request: Request, exc: UnsupportedOperatorError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "UNSUPPORTED_OPERATOR"},
        )

    @app.exception_handler(ModerationUnavailableError)
    async def moderation_unavailable_handler(request: Request, exc: ModerationUnavailableError):
        QUEST_MODERATION_FAILURES.inc()
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "MODERATION_UNAVAILABLE"},
        )

    @app.exception_handler(QuestServiceError)
    async def quest_service_error_handler(request: Request, exc: QuestServiceError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "QUEST_SERVICE_ERROR"},
        )
