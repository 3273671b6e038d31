"""Redis Completion Ledger 통합 테스트.

실제 Redis가 필요합니다 (QUEST_REDIS_URL, 기본 localhost:6379/0).

    pytest -m integration
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
import pytest_asyncio
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError

from apps.quest.application.quest.dto import CompletionKey
from apps.quest.infrastructure.persistence_redis import RedisCompletionLedger

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

REDIS_URL = os.getenv("QUEST_REDIS_URL", "redis://localhost:6379/0")


@pytest_asyncio.fixture
async def ledger() -> AsyncIterator[RedisCompletionLedger]:
    redis = Redis.from_url(REDIS_URL, decode_responses=True)
    try:
        await redis.ping()
    except RedisConnectionError:
        await redis.aclose()
        pytest.skip(f"Redis not available at {REDIS_URL}")

    prefix = f"test:quest:{uuid4().hex}:"
    ledger = RedisCompletionLedger(redis, key_prefix=prefix)
    yield ledger

    keys = [key async for key in redis.scan_iter(match=f"{prefix}*")]
    if keys:
        await redis.delete(*keys)
    await ledger.close()


async def test_reserve_once(ledger: RedisCompletionLedger) -> None:
    key = CompletionKey(quest_id=uuid4(), user_id=uuid4())

    assert await ledger.contains(key) is False
    assert await ledger.reserve_if_absent(key) is True
    assert await ledger.reserve_if_absent(key) is False
    assert await ledger.contains(key) is True


async def test_concurrent_reservations_single_winner(ledger: RedisCompletionLedger) -> None:
    key = CompletionKey(quest_id=uuid4(), user_id=uuid4())

    results = await asyncio.gather(*(ledger.reserve_if_absent(key) for _ in range(10)))

    assert results.count(True) == 1
