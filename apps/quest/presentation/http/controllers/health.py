"""Health Check Controller."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from apps.quest.application.quest.ports import CompletionLedger
from apps.quest.setup.config import get_settings
from apps.quest.setup.dependencies import get_completion_ledger

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    settings = get_settings()
    return {"status": "ok", "service": settings.service_name, "version": settings.service_version}


@router.get("/ready")
async def ready(
    ledger: Annotated[CompletionLedger, Depends(get_completion_ledger)],
) -> JSONResponse:
    """Readiness probe (completion ledger 연결 확인)."""
    try:
        await ledger.ping()
    except Exception as e:
        return JSONResponse(
            {"status": "not_ready", "reason": f"completion_ledger_ping_failed: {e}"},
            status_code=503,
        )
    return JSONResponse({"status": "ready"})
