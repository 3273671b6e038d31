"""Domain Enums."""

from apps.quest.domain.enums.quest import (
    ConditionKind,
    ConditionOperator,
    QuestStatus,
)

__all__ = ["ConditionKind", "ConditionOperator", "QuestStatus"]
