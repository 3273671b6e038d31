"""Quest Service Configuration.

환경변수 기반 설정 (prefix: QUEST_).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.quest.domain.constants import DEFAULT_BLOCKED_WORDS


class Settings(BaseSettings):
    """Quest 서비스 설정."""

    # Service
    service_name: str = "quest-api"
    service_version: str = "1.0.0"
    environment: str = "local"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["ecs", "text"] = "ecs"

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Completion Ledger
    ledger_backend: Literal["memory", "redis"] = Field(
        "memory",
        description="완료 기록 저장소 (memory: 프로세스 로컬, redis: 공유 저장소)",
    )
    redis_url: str = "redis://localhost:6379/0"
    completion_key_prefix: str = "quest:completion:"

    # Moderation
    moderation_backend: Literal["keyword", "http"] = "keyword"
    moderation_blocked_words: list[str] = Field(default_factory=lambda: list(DEFAULT_BLOCKED_WORDS))
    moderation_api_url: str | None = None
    moderation_api_key: str | None = None
    moderation_timeout_seconds: float = Field(
        5.0,
        gt=0,
        le=60.0,
        description="Moderation 호출 최대 대기 시간 (초). 초과 시 평가 실패.",
    )

    model_config = SettingsConfigDict(
        env_prefix="QUEST_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤."""
    return Settings()
