"""AccessConditionEvaluator.

접근 조건 평가 - 순수 함수만 포함합니다 (부수 효과 없음).

조건 값 파싱 실패(날짜/숫자 아님)는 예외 대신 조건 미충족으로 처리합니다.
"""

from __future__ import annotations

import logging
import math
import operator
from datetime import datetime, timezone
from typing import Any, Callable

from apps.quest.application.quest.dto import SubmissionRequest
from apps.quest.domain.entities import (
    AssetOwnershipCondition,
    Condition,
    DateCondition,
    LevelCondition,
)
from apps.quest.domain.enums import ConditionOperator

logger = logging.getLogger(__name__)

# (사용자 값, 조건 값) → 통과 여부
_COMPARISONS: dict[ConditionOperator, Callable[[Any, Any], bool]] = {
    ConditionOperator.GREATER_THAN: operator.gt,
    ConditionOperator.LESS_THAN: operator.lt,
    ConditionOperator.EQUALS: operator.eq,
}

# (조건 값, 보유 자산) → 통과 여부
_MEMBERSHIP: dict[ConditionOperator, Callable[[str, frozenset[str]], bool]] = {
    ConditionOperator.CONTAINS: lambda value, owned: value in owned,
    ConditionOperator.NOT_CONTAINS: lambda value, owned: value not in owned,
}


def _as_utc(value: datetime) -> datetime:
    """naive datetime은 UTC로 간주."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_timestamp(raw: str) -> datetime | None:
    try:
        return _as_utc(datetime.fromisoformat(raw.strip()))
    except ValueError:
        return None


def _parse_number(raw: str) -> float | None:
    try:
        number = float(raw)
    except ValueError:
        return None
    return None if math.isnan(number) else number


class AccessConditionEvaluator:
    """접근 조건 평가기.

    Condition variant별 평가 함수로 분기합니다.
    알 수 없는 variant는 경고 로그 후 미충족으로 처리합니다.
    """

    def check(self, request: SubmissionRequest, condition: Condition) -> bool:
        """조건 하나를 평가합니다.

        Args:
            request: 제출 요청
            condition: 접근 조건

        Returns:
            조건 충족 여부
        """
        match condition:
            case AssetOwnershipCondition():
                passed = self.check_asset_ownership(request, condition)
            case DateCondition():
                passed = self.check_date(request, condition)
            case LevelCondition():
                passed = self.check_level(request, condition)
            case _:
                logger.warning(
                    "Unknown condition kind",
                    extra={
                        "quest_id": str(request.quest_id),
                        "condition_type": type(condition).__name__,
                    },
                )
                return False

        if not passed:
            logger.info(
                "Access condition not met",
                extra={
                    "quest_id": str(request.quest_id),
                    "user_id": str(request.user_id),
                    "condition_kind": condition.kind.value,
                    "operator": condition.operator.value,
                    "condition_value": condition.value,
                },
            )
        return passed

    def check_all(self, request: SubmissionRequest) -> bool:
        """모든 조건을 순서대로 평가 (첫 실패에서 중단)."""
        return all(self.check(request, condition) for condition in request.access_conditions)

    def check_asset_ownership(
        self,
        request: SubmissionRequest,
        condition: AssetOwnershipCondition,
    ) -> bool:
        """자산 소유 조건."""
        return _MEMBERSHIP[condition.operator](condition.value, request.user_profile.owned_assets)

    def check_date(self, request: SubmissionRequest, condition: DateCondition) -> bool:
        """claimed_at 날짜 조건 (정확한 시각 비교)."""
        threshold = _parse_timestamp(condition.value)
        if threshold is None:
            logger.warning(
                "Invalid date condition value",
                extra={"quest_id": str(request.quest_id), "condition_value": condition.value},
            )
            return False

        claimed_at = _as_utc(request.claimed_at)
        return _COMPARISONS[condition.operator](claimed_at, threshold)

    def check_level(self, request: SubmissionRequest, condition: LevelCondition) -> bool:
        """사용자 레벨 조건."""
        threshold = _parse_number(condition.value)
        if threshold is None:
            logger.warning(
                "Invalid level condition value",
                extra={"quest_id": str(request.quest_id), "condition_value": condition.value},
            )
            return False

        return _COMPARISONS[condition.operator](request.user_profile.level, threshold)
