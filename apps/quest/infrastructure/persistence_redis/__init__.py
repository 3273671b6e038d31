"""Redis persistence adapters."""

from apps.quest.infrastructure.persistence_redis.completion_ledger_redis import (
    COMPLETION_KEY_PREFIX,
    RedisCompletionLedger,
)

__all__ = ["COMPLETION_KEY_PREFIX", "RedisCompletionLedger"]
