"""In-process persistence adapters."""

from apps.quest.infrastructure.persistence_memory.completion_ledger_memory import (
    InMemoryCompletionLedger,
)

__all__ = ["InMemoryCompletionLedger"]
