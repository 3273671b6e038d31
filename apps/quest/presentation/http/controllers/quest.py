"""Quest HTTP Controller."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from apps.quest.application.quest import EvaluateSubmissionCommand
from apps.quest.application.quest.dto import (
    EvaluationReason,
    SubmissionRequest,
    UserProfile,
)
from apps.quest.domain.entities import build_condition
from apps.quest.metrics import QUEST_EVALUATIONS, QUEST_SUBMISSION_SCORE
from apps.quest.presentation.http.schemas import QuestSubmitRequest, QuestSubmitResponse
from apps.quest.setup.dependencies import get_evaluate_submission_command

router = APIRouter(prefix="/quest", tags=["quest"])


def to_submission_request(request: QuestSubmitRequest) -> SubmissionRequest:
    """HTTP 스키마를 Application DTO로 변환.

    Raises:
        UnsupportedOperatorError: 조건 종류에 맞지 않는 연산자
    """
    return SubmissionRequest(
        quest_id=request.quest_id,
        user_id=request.user_id,
        claimed_at=request.claimed_at,
        access_conditions=tuple(
            build_condition(condition.type, condition.operator, condition.value)
            for condition in request.access_condition
        ),
        user_profile=UserProfile(
            level=request.user_data.level,
            completed_quests=frozenset(request.user_data.completed_quests),
            owned_assets=frozenset(request.user_data.nfts),
        ),
        submission_text=request.submission_text,
    )


@router.post(
    "/submit",
    response_model=QuestSubmitResponse,
    status_code=status.HTTP_200_OK,
    summary="퀘스트 제출 평가",
    description="접근 조건 확인 후 제출 텍스트를 채점하여 퀘스트 완료 여부를 반환합니다.",
)
async def submit_quest(
    request: QuestSubmitRequest,
    command: Annotated[EvaluateSubmissionCommand, Depends(get_evaluate_submission_command)],
) -> QuestSubmitResponse:
    """퀘스트 제출을 평가합니다."""
    result = await command.execute(to_submission_request(request))

    QUEST_EVALUATIONS.labels(status=result.status.value, reason=result.reason.value).inc()
    if result.reason in (EvaluationReason.SCORED, EvaluationReason.MODERATED):
        QUEST_SUBMISSION_SCORE.observe(result.score)

    return QuestSubmitResponse(status=result.status, score=result.score)
