"""Dependency Injection.

FastAPI 의존성 주입 팩토리.

Completion Ledger는 프로세스 전역 싱글톤입니다
(memory: 프로세스 로컬 set, redis: SET NX 공유 저장소).
"""

from __future__ import annotations

from typing import Annotated

import httpx
from fastapi import Depends
from redis.asyncio import Redis

from apps.quest.application.quest import EvaluateSubmissionCommand
from apps.quest.application.quest.ports import CompletionLedger, ContentModerator
from apps.quest.application.quest.services import (
    AccessConditionEvaluator,
    SubmissionScorer,
)
from apps.quest.infrastructure.moderation import (
    HttpContentModerator,
    KeywordContentModerator,
)
from apps.quest.infrastructure.persistence_memory import InMemoryCompletionLedger
from apps.quest.infrastructure.persistence_redis import RedisCompletionLedger
from apps.quest.setup.config import Settings, get_settings

# 싱글톤
_ledger: CompletionLedger | None = None
_moderator: ContentModerator | None = None


def build_completion_ledger(settings: Settings) -> CompletionLedger:
    """설정에 맞는 CompletionLedger 생성."""
    if settings.ledger_backend == "redis":
        redis = Redis.from_url(settings.redis_url, decode_responses=True)
        return RedisCompletionLedger(redis, key_prefix=settings.completion_key_prefix)
    return InMemoryCompletionLedger()


def build_content_moderator(settings: Settings) -> ContentModerator:
    """설정에 맞는 ContentModerator 생성."""
    if settings.moderation_backend == "http":
        if not settings.moderation_api_url:
            raise ValueError("QUEST_MODERATION_API_URL is required for the http moderation backend")
        client = httpx.AsyncClient(timeout=settings.moderation_timeout_seconds)
        return HttpContentModerator(
            api_url=settings.moderation_api_url,
            http_client=client,
            api_key=settings.moderation_api_key,
        )
    return KeywordContentModerator(settings.moderation_blocked_words)


async def get_completion_ledger() -> CompletionLedger:
    """CompletionLedger 싱글톤을 주입합니다."""
    global _ledger
    if _ledger is None:
        _ledger = build_completion_ledger(get_settings())
    return _ledger


async def get_content_moderator() -> ContentModerator:
    """ContentModerator 싱글톤을 주입합니다."""
    global _moderator
    if _moderator is None:
        _moderator = build_content_moderator(get_settings())
    return _moderator


async def get_evaluate_submission_command(
    ledger: Annotated[CompletionLedger, Depends(get_completion_ledger)],
    moderator: Annotated[ContentModerator, Depends(get_content_moderator)],
) -> EvaluateSubmissionCommand:
    """EvaluateSubmissionCommand를 주입합니다."""
    settings = get_settings()
    return EvaluateSubmissionCommand(
        ledger=ledger,
        moderator=moderator,
        condition_evaluator=AccessConditionEvaluator(),
        scorer=SubmissionScorer(),
        moderation_timeout=settings.moderation_timeout_seconds,
    )


async def cleanup() -> None:
    """리소스 정리."""
    global _ledger, _moderator

    if _ledger is not None:
        await _ledger.close()
        _ledger = None

    if _moderator is not None:
        await _moderator.close()
        _moderator = None
