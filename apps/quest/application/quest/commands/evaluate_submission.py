"""EvaluateSubmissionCommand.

퀘스트 제출 평가 Command입니다.
"""

from __future__ import annotations

import asyncio
import logging

from apps.quest.application.quest.dto import (
    CompletionKey,
    EvaluationReason,
    EvaluationResult,
    SubmissionRequest,
)
from apps.quest.application.quest.exceptions import ModerationUnavailableError
from apps.quest.application.quest.ports import CompletionLedger, ContentModerator
from apps.quest.application.quest.services import (
    AccessConditionEvaluator,
    SubmissionScorer,
)
from apps.quest.domain.constants import PASSING_SCORE
from apps.quest.domain.enums import QuestStatus

logger = logging.getLogger(__name__)

DEFAULT_MODERATION_TIMEOUT = 5.0  # seconds


class EvaluateSubmissionCommand:
    """퀘스트 제출 평가 Command.

    플로우:
    1. 완료 기록 확인 → 이미 완료면 {fail, 0}
    2. 접근 조건 순차 평가 → 하나라도 실패하면 {fail, 0} (기록 안 함)
    3. 휴리스틱 점수 계산
    4. Moderation → 부적절하면 점수 0
    5. PASSING_SCORE 이상이면 success
    6. 완료 기록 원자적 예약 (동시 요청 중 하나만 결과 확정)
    """

    def __init__(
        self,
        ledger: CompletionLedger,
        moderator: ContentModerator,
        condition_evaluator: AccessConditionEvaluator,
        scorer: SubmissionScorer,
        moderation_timeout: float = DEFAULT_MODERATION_TIMEOUT,
    ) -> None:
        """Initialize.

        Args:
            ledger: 완료 기록 저장소
            moderator: 텍스트 검열기
            condition_evaluator: 접근 조건 평가기
            scorer: 점수 계산기
            moderation_timeout: moderation 최대 대기 시간 (초)
        """
        self._ledger = ledger
        self._moderator = moderator
        self._condition_evaluator = condition_evaluator
        self._scorer = scorer
        self._moderation_timeout = moderation_timeout

    async def execute(self, request: SubmissionRequest) -> EvaluationResult:
        """제출을 평가합니다.

        Args:
            request: 제출 요청

        Returns:
            평가 결과

        Raises:
            ModerationUnavailableError: moderation 실패/타임아웃 (기록 안 함)
        """
        key = CompletionKey.for_request(request)
        log_extra = {"quest_id": str(request.quest_id), "user_id": str(request.user_id)}

        # 1. 멱등성 확인
        if await self._ledger.contains(key):
            logger.info("Quest already completed by user", extra=log_extra)
            return EvaluationResult.rejected(EvaluationReason.ALREADY_COMPLETED)

        # 2. 접근 조건 (첫 실패에서 중단, 재시도 가능하도록 기록하지 않음)
        if not self._condition_evaluator.check_all(request):
            return EvaluationResult.rejected(EvaluationReason.CONDITIONS_NOT_MET)

        # 3. 점수 계산
        breakdown = self._scorer.score(request.submission_text)
        score = breakdown.total
        reason = EvaluationReason.SCORED

        # 4. Moderation veto
        if await self._is_disallowed(request.submission_text, log_extra):
            logger.debug("Submission contains disallowed content, score reset to 0", extra=log_extra)
            score = 0
            reason = EvaluationReason.MODERATED

        # 5. 통과 판정
        status = QuestStatus.SUCCESS if score >= PASSING_SCORE else QuestStatus.FAIL

        # 6. 완료 기록 (check + insert 원자적)
        if not await self._ledger.reserve_if_absent(key):
            logger.info("Concurrent evaluation already completed quest", extra=log_extra)
            return EvaluationResult.rejected(EvaluationReason.ALREADY_COMPLETED)

        logger.info(
            "Quest evaluated",
            extra={**log_extra, "status": status.value, "score": score},
        )
        return EvaluationResult(status=status, score=score, reason=reason, breakdown=breakdown)

    async def _is_disallowed(self, text: str, log_extra: dict[str, str]) -> bool:
        """Moderation 호출 (타임아웃/예외는 fail-closed로 전파)."""
        try:
            return await asyncio.wait_for(
                self._moderator.is_disallowed(text),
                timeout=self._moderation_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Content moderation timed out",
                extra={**log_extra, "timeout_seconds": self._moderation_timeout},
            )
            raise ModerationUnavailableError("timed out") from e
        except Exception as e:
            logger.error(
                "Content moderation failed",
                extra={**log_extra, "error": str(e)},
                exc_info=True,
            )
            raise ModerationUnavailableError(str(e) or type(e).__name__) from e
