"""Condition variant 생성 테스트."""

from __future__ import annotations

import pytest

from apps.quest.domain.entities import (
    AssetOwnershipCondition,
    DateCondition,
    LevelCondition,
    build_condition,
)
from apps.quest.domain.enums import ConditionKind, ConditionOperator
from apps.quest.domain.exceptions import QuestServiceError, UnsupportedOperatorError


class TestBuildCondition:
    """build_condition 테스트."""

    @pytest.mark.parametrize(
        ("kind", "operator", "expected_type"),
        [
            (ConditionKind.NFT, ConditionOperator.CONTAINS, AssetOwnershipCondition),
            (ConditionKind.NFT, ConditionOperator.NOT_CONTAINS, AssetOwnershipCondition),
            (ConditionKind.DATE, ConditionOperator.GREATER_THAN, DateCondition),
            (ConditionKind.DATE, ConditionOperator.EQUALS, DateCondition),
            (ConditionKind.LEVEL, ConditionOperator.LESS_THAN, LevelCondition),
        ],
    )
    def test_builds_matching_variant(
        self,
        kind: ConditionKind,
        operator: ConditionOperator,
        expected_type: type,
    ) -> None:
        """kind에 맞는 variant 생성."""
        condition = build_condition(kind, operator, "10")

        assert isinstance(condition, expected_type)
        assert condition.kind == kind
        assert condition.operator == operator
        assert condition.value == "10"

    def test_accepts_wire_strings(self) -> None:
        """wire 문자열 값도 enum으로 변환."""
        condition = build_condition("level", ">", "3")  # type: ignore[arg-type]

        assert isinstance(condition, LevelCondition)
        assert condition.operator is ConditionOperator.GREATER_THAN

    @pytest.mark.parametrize(
        ("kind", "operator"),
        [
            (ConditionKind.NFT, ConditionOperator.GREATER_THAN),
            (ConditionKind.NFT, ConditionOperator.EQUALS),
            (ConditionKind.DATE, ConditionOperator.CONTAINS),
            (ConditionKind.LEVEL, ConditionOperator.NOT_CONTAINS),
        ],
    )
    def test_rejects_unmapped_operator(self, kind: ConditionKind, operator: ConditionOperator) -> None:
        """kind에 정의되지 않은 연산자는 거부."""
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            build_condition(kind, operator, "x")

        assert exc_info.value.kind == kind
        assert exc_info.value.operator == operator
        assert isinstance(exc_info.value, QuestServiceError)

    def test_direct_construction_also_validates(self) -> None:
        """variant 직접 생성 시에도 검증."""
        with pytest.raises(UnsupportedOperatorError):
            LevelCondition(operator=ConditionOperator.CONTAINS, value="1")

    def test_condition_is_immutable(self) -> None:
        """Condition은 불변 객체."""
        condition = DateCondition(operator=ConditionOperator.LESS_THAN, value="2024-01-01")

        with pytest.raises(AttributeError):
            condition.value = "2025-01-01"  # type: ignore[misc]
