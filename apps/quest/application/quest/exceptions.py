"""Application Exceptions."""

from apps.quest.domain.exceptions import QuestServiceError


class ModerationUnavailableError(QuestServiceError):
    """Moderation 호출 실패 또는 타임아웃.

    fail-closed: 평가를 중단하고 호출자에게 전파합니다.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"Content moderation unavailable: {detail}")
