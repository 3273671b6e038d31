"""HTTP Schemas."""

from apps.quest.presentation.http.schemas.quest import (
    AccessConditionRequest,
    QuestSubmitRequest,
    QuestSubmitResponse,
    UserDataRequest,
)

__all__ = [
    "AccessConditionRequest",
    "QuestSubmitRequest",
    "QuestSubmitResponse",
    "UserDataRequest",
]
