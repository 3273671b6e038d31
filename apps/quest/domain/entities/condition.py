"""Access Condition Entities.

퀘스트 접근 조건을 종류별 variant로 표현합니다.

    Condition
    ├── AssetOwnershipCondition (nft)   → contains, notContains
    ├── DateCondition           (date)  → <, >, =
    └── LevelCondition          (level) → <, >, =

각 variant는 허용 연산자 집합을 선언하며, 그 외 연산자는
생성 시점에 UnsupportedOperatorError로 거부됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from apps.quest.domain.enums import ConditionKind, ConditionOperator
from apps.quest.domain.exceptions import UnsupportedOperatorError

_COMPARISON_OPERATORS = frozenset(
    {
        ConditionOperator.LESS_THAN,
        ConditionOperator.GREATER_THAN,
        ConditionOperator.EQUALS,
    }
)


@dataclass(frozen=True, slots=True)
class _ConditionBase:
    """조건 공통 필드.

    Attributes:
        operator: 조건 연산자
        value: 비교 대상 원본 문자열 (파싱은 평가 시점에 수행)
    """

    KIND: ClassVar[ConditionKind]
    OPERATORS: ClassVar[frozenset[ConditionOperator]]

    operator: ConditionOperator
    value: str

    def __post_init__(self) -> None:
        if self.operator not in self.OPERATORS:
            raise UnsupportedOperatorError(self.KIND, self.operator)

    @property
    def kind(self) -> ConditionKind:
        return self.KIND


@dataclass(frozen=True, slots=True)
class AssetOwnershipCondition(_ConditionBase):
    """자산(NFT) 소유 조건."""

    KIND: ClassVar[ConditionKind] = ConditionKind.NFT
    OPERATORS: ClassVar[frozenset[ConditionOperator]] = frozenset(
        {ConditionOperator.CONTAINS, ConditionOperator.NOT_CONTAINS}
    )


@dataclass(frozen=True, slots=True)
class DateCondition(_ConditionBase):
    """claimed_at 기준 날짜 조건."""

    KIND: ClassVar[ConditionKind] = ConditionKind.DATE
    OPERATORS: ClassVar[frozenset[ConditionOperator]] = _COMPARISON_OPERATORS


@dataclass(frozen=True, slots=True)
class LevelCondition(_ConditionBase):
    """사용자 레벨 조건."""

    KIND: ClassVar[ConditionKind] = ConditionKind.LEVEL
    OPERATORS: ClassVar[frozenset[ConditionOperator]] = _COMPARISON_OPERATORS


Condition = Union[AssetOwnershipCondition, DateCondition, LevelCondition]

_CONDITION_TYPES: dict[ConditionKind, type[_ConditionBase]] = {
    ConditionKind.NFT: AssetOwnershipCondition,
    ConditionKind.DATE: DateCondition,
    ConditionKind.LEVEL: LevelCondition,
}


def build_condition(kind: ConditionKind, operator: ConditionOperator, value: str) -> Condition:
    """wire 형식(kind, operator, value)을 Condition variant로 변환.

    Raises:
        UnsupportedOperatorError: kind에 정의되지 않은 연산자
    """
    condition_type = _CONDITION_TYPES[ConditionKind(kind)]
    return condition_type(operator=ConditionOperator(operator), value=value)  # type: ignore[return-value]
