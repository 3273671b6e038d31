"""Content Moderator Port."""

from abc import ABC, abstractmethod


class ContentModerator(ABC):
    """제출 텍스트 검열 포트.

    금칙어 매칭, 외부 moderation API 등으로 교체 가능합니다.
    실패 시 예외를 그대로 전파해야 합니다 (clean으로 간주 금지).
    """

    @abstractmethod
    async def is_disallowed(self, text: str) -> bool:
        """부적절한 내용 포함 여부.

        Args:
            text: 검사할 텍스트

        Returns:
            부적절한 내용이 있으면 True
        """
        ...

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
