"""Quest Domain Enums."""

from enum import Enum


class ConditionKind(str, Enum):
    """접근 조건 종류 (wire 값 유지)."""

    NFT = "nft"
    DATE = "date"
    LEVEL = "level"


class ConditionOperator(str, Enum):
    """조건 연산자.

    contains/notContains 는 자산 소유 조건 전용,
    비교 연산자(<, >, =)는 날짜/레벨 조건 전용입니다.
    """

    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUALS = "="


class QuestStatus(str, Enum):
    """퀘스트 평가 결과 상태."""

    SUCCESS = "success"
    FAIL = "fail"
