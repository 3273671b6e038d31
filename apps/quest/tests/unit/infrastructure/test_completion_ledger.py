"""CompletionLedger 구현체 테스트."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.quest.application.quest.dto import CompletionKey
from apps.quest.infrastructure.persistence_memory import InMemoryCompletionLedger
from apps.quest.infrastructure.persistence_redis import (
    COMPLETION_KEY_PREFIX,
    RedisCompletionLedger,
)


@pytest.fixture
def key() -> CompletionKey:
    return CompletionKey(quest_id=uuid4(), user_id=uuid4())


class TestInMemoryCompletionLedger:
    """InMemoryCompletionLedger 테스트."""

    @pytest.mark.asyncio
    async def test_reserve_then_contains(self, key: CompletionKey) -> None:
        ledger = InMemoryCompletionLedger()

        assert await ledger.contains(key) is False
        assert await ledger.reserve_if_absent(key) is True
        assert await ledger.contains(key) is True

    @pytest.mark.asyncio
    async def test_second_reserve_fails(self, key: CompletionKey) -> None:
        ledger = InMemoryCompletionLedger()

        await ledger.reserve_if_absent(key)

        assert await ledger.reserve_if_absent(key) is False
        assert len(ledger) == 1

    @pytest.mark.asyncio
    async def test_keys_are_value_based(self, key: CompletionKey) -> None:
        ledger = InMemoryCompletionLedger()
        await ledger.reserve_if_absent(key)

        same = CompletionKey(quest_id=key.quest_id, user_id=key.user_id)

        assert await ledger.contains(same) is True

    @pytest.mark.asyncio
    async def test_concurrent_reserve_single_winner(self, key: CompletionKey) -> None:
        ledger = InMemoryCompletionLedger()

        results = await asyncio.gather(*(ledger.reserve_if_absent(key) for _ in range(10)))

        assert results.count(True) == 1


class TestRedisCompletionLedger:
    """RedisCompletionLedger 테스트."""

    @pytest.fixture
    def ledger(self, mock_redis: AsyncMock) -> RedisCompletionLedger:
        return RedisCompletionLedger(mock_redis)

    @pytest.fixture
    def mock_redis(self) -> AsyncMock:
        """Mock Redis 클라이언트."""
        redis = AsyncMock()
        redis.exists = AsyncMock(return_value=0)
        redis.set = AsyncMock(return_value=True)
        redis.aclose = AsyncMock()
        return redis

    @pytest.mark.asyncio
    async def test_contains_true(self, ledger, mock_redis, key) -> None:
        mock_redis.exists.return_value = 1

        assert await ledger.contains(key) is True
        mock_redis.exists.assert_awaited_once_with(f"{COMPLETION_KEY_PREFIX}{key.quest_id}:{key.user_id}")

    @pytest.mark.asyncio
    async def test_contains_false(self, ledger, mock_redis, key) -> None:
        assert await ledger.contains(key) is False

    @pytest.mark.asyncio
    async def test_reserve_uses_set_nx(self, ledger, mock_redis, key) -> None:
        """SET NX 단일 명령으로 예약."""
        assert await ledger.reserve_if_absent(key) is True

        mock_redis.set.assert_awaited_once_with(
            f"{COMPLETION_KEY_PREFIX}{key.quest_id}:{key.user_id}",
            "1",
            nx=True,
        )

    @pytest.mark.asyncio
    async def test_reserve_existing_key(self, ledger, mock_redis, key) -> None:
        """SET NX 실패 시 (None 반환) False."""
        mock_redis.set.return_value = None

        assert await ledger.reserve_if_absent(key) is False

    @pytest.mark.asyncio
    async def test_custom_prefix(self, mock_redis, key) -> None:
        ledger = RedisCompletionLedger(mock_redis, key_prefix="test:done:")

        await ledger.contains(key)

        mock_redis.exists.assert_awaited_once_with(f"test:done:{key.quest_id}:{key.user_id}")

    @pytest.mark.asyncio
    async def test_close(self, ledger, mock_redis) -> None:
        await ledger.close()

        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ping_propagates_connection_error(self, ledger, mock_redis) -> None:
        mock_redis.ping = AsyncMock(side_effect=ConnectionError("refused"))

        with pytest.raises(ConnectionError):
            await ledger.ping()
