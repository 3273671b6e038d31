"""Redis Completion Ledger.

Redis 기반 완료 기록 저장소 구현체입니다.

데이터 구조:
- quest:completion:{quest_id}:{user_id} → String ("1", 만료 없음)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.quest.application.quest.dto import CompletionKey
from apps.quest.application.quest.ports import CompletionLedger

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

COMPLETION_KEY_PREFIX = "quest:completion:"


class RedisCompletionLedger(CompletionLedger):
    """Redis 기반 CompletionLedger.

    reserve_if_absent는 SET NX 단일 명령으로 원자적으로 수행됩니다.
    """

    def __init__(self, redis: "aioredis.Redis", key_prefix: str = COMPLETION_KEY_PREFIX) -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트
            key_prefix: 키 프리픽스
        """
        self._redis = redis
        self._key_prefix = key_prefix

    def _key(self, key: CompletionKey) -> str:
        return f"{self._key_prefix}{key.quest_id}:{key.user_id}"

    async def contains(self, key: CompletionKey) -> bool:
        """완료 기록 존재 여부."""
        return await self._redis.exists(self._key(key)) > 0

    async def reserve_if_absent(self, key: CompletionKey) -> bool:
        """SET NX로 완료 기록 생성.

        Returns:
            새로 기록했으면 True
        """
        acquired = await self._redis.set(self._key(key), "1", nx=True)

        if acquired:
            logger.debug("Completion recorded", extra={"completion_key": str(key)})
        else:
            logger.debug("Completion already recorded", extra={"completion_key": str(key)})

        return bool(acquired)

    async def ping(self) -> None:
        await self._redis.ping()

    async def close(self) -> None:
        await self._redis.aclose()
