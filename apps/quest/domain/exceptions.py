"""Custom exceptions for Quest service."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.quest.domain.enums import ConditionKind, ConditionOperator


class QuestServiceError(Exception):
    """Base exception for Quest service."""

    def __init__(self, message: str = "Quest service error occurred") -> None:
        self.message = message
        super().__init__(message)


class UnsupportedOperatorError(QuestServiceError):
    """Raised when an operator is not defined for a condition kind."""

    def __init__(self, kind: ConditionKind, operator: ConditionOperator) -> None:
        self.kind = kind
        self.operator = operator
        super().__init__(f"Operator '{operator.value}' is not supported for '{kind.value}' conditions")
