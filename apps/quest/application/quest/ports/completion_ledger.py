"""Completion Ledger Port."""

from abc import ABC, abstractmethod

from apps.quest.application.quest.dto import CompletionKey


class CompletionLedger(ABC):
    """퀘스트 완료 기록 포트.

    (quest, user) 쌍이 채점 기회를 이미 소진했는지 기록합니다.
    구현체는 reserve_if_absent를 원자적으로 수행해야 합니다
    (in-process set, Redis SET NX, 트랜잭션 테이블 등).
    """

    @abstractmethod
    async def contains(self, key: CompletionKey) -> bool:
        """완료 기록 존재 여부.

        Args:
            key: (quest, user) 키

        Returns:
            기록이 있으면 True
        """
        ...

    @abstractmethod
    async def reserve_if_absent(self, key: CompletionKey) -> bool:
        """키가 없을 때만 기록 (check + insert 단일 연산).

        Args:
            key: (quest, user) 키

        Returns:
            이번 호출이 기록을 생성했으면 True, 이미 있었으면 False
        """
        ...

    async def ping(self) -> None:
        """저장소 연결 확인 (readiness). 실패 시 예외."""
        pass

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
