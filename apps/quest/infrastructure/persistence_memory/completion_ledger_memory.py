"""In-Memory Completion Ledger.

프로세스 단위 완료 기록 저장소 (재시작 시 초기화).
"""

from __future__ import annotations

import logging
import threading

from apps.quest.application.quest.dto import CompletionKey
from apps.quest.application.quest.ports import CompletionLedger

logger = logging.getLogger(__name__)


class InMemoryCompletionLedger(CompletionLedger):
    """In-process set 기반 CompletionLedger.

    check + insert는 하나의 lock 구간에서 수행됩니다.
    """

    def __init__(self) -> None:
        self._keys: set[CompletionKey] = set()
        self._lock = threading.Lock()

    async def contains(self, key: CompletionKey) -> bool:
        with self._lock:
            return key in self._keys

    async def reserve_if_absent(self, key: CompletionKey) -> bool:
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)

        logger.debug("Completion recorded", extra={"completion_key": str(key)})
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
