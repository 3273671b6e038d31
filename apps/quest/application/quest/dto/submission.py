"""Submission DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from apps.quest.domain.entities import Condition
from apps.quest.domain.enums import QuestStatus


@dataclass(frozen=True, slots=True)
class UserProfile:
    """제출 시점의 사용자 프로필.

    Attributes:
        completed_quests: 완료한 퀘스트 ID 목록
        owned_assets: 보유 자산(NFT) 식별자 (hex)
        level: 사용자 레벨 (양수)
    """

    level: int
    completed_quests: frozenset[UUID] = frozenset()
    owned_assets: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class SubmissionRequest:
    """퀘스트 제출 요청.

    Attributes:
        quest_id: 퀘스트 ID
        user_id: 사용자 ID
        claimed_at: 제출(클레임) 시각
        access_conditions: 접근 조건 (순서대로 평가)
        user_profile: 사용자 프로필
        submission_text: 제출 텍스트 (비어있지 않음)
    """

    quest_id: UUID
    user_id: UUID
    claimed_at: datetime
    user_profile: UserProfile
    submission_text: str
    access_conditions: tuple[Condition, ...] = ()


@dataclass(frozen=True, slots=True)
class CompletionKey:
    """Completion ledger 키 (quest, user)."""

    quest_id: UUID
    user_id: UUID

    @classmethod
    def for_request(cls, request: SubmissionRequest) -> CompletionKey:
        return cls(quest_id=request.quest_id, user_id=request.user_id)

    def __str__(self) -> str:
        return f"{self.quest_id}:{self.user_id}"


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """규칙별 점수 내역.

    Attributes:
        punctuation: 구두점 점수
        palindrome: 회문 점수
        joyful_words: 긍정 단어 점수
        repetition: 반복 단어 점수
    """

    punctuation: int = 0
    palindrome: int = 0
    joyful_words: int = 0
    repetition: int = 0

    @property
    def total(self) -> int:
        return self.punctuation + self.palindrome + self.joyful_words + self.repetition


class EvaluationReason(str, Enum):
    """평가 종료 사유 (로깅/메트릭용)."""

    SCORED = "scored"
    MODERATED = "moderated"
    ALREADY_COMPLETED = "already_completed"
    CONDITIONS_NOT_MET = "conditions_not_met"


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """퀘스트 평가 결과.

    Attributes:
        status: success / fail
        score: 최종 점수 (moderation 반영 후)
        reason: 평가 종료 사유
        breakdown: moderation 이전 규칙별 점수 (점수 계산 전에 종료되면 None)
    """

    status: QuestStatus
    score: int
    reason: EvaluationReason = EvaluationReason.SCORED
    breakdown: ScoreBreakdown | None = field(default=None, compare=False)

    @classmethod
    def rejected(cls, reason: EvaluationReason) -> EvaluationResult:
        """점수 계산 없이 종료된 결과 ({fail, 0})."""
        return cls(status=QuestStatus.FAIL, score=0, reason=reason)
