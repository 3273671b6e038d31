"""Quest HTTP Schemas.

기존 클라이언트와의 호환을 위해 wire 필드명(questId, claimed_at, user_data 등)을 유지합니다.
"""

from datetime import datetime
from typing import Annotated

from pydantic import UUID4, BaseModel, Field, PositiveInt, StringConstraints

from apps.quest.domain.enums import ConditionKind, ConditionOperator, QuestStatus

HexIdentifier = Annotated[str, StringConstraints(pattern=r"^(0[xXhH])?[0-9a-fA-F]+$")]


class AccessConditionRequest(BaseModel):
    """접근 조건."""

    type: ConditionKind = Field(..., description="조건 종류 (nft, date, level)")
    operator: ConditionOperator = Field(..., description="연산자 (contains, notContains, <, >, =)")
    value: str = Field(..., description="비교 값")


class UserDataRequest(BaseModel):
    """사용자 프로필."""

    completed_quests: list[UUID4] = Field(default_factory=list, description="완료한 퀘스트 ID")
    nfts: list[HexIdentifier] = Field(default_factory=list, description="보유 NFT (hex)")
    level: PositiveInt = Field(..., description="사용자 레벨")


class QuestSubmitRequest(BaseModel):
    """퀘스트 제출 요청."""

    quest_id: UUID4 = Field(..., alias="questId", description="퀘스트 ID")
    user_id: UUID4 = Field(..., alias="userId", description="사용자 ID")
    claimed_at: datetime = Field(..., description="클레임 시각 (ISO-8601)")
    access_condition: list[AccessConditionRequest] = Field(..., description="접근 조건 (순서대로 평가)")
    user_data: UserDataRequest = Field(..., description="사용자 프로필")
    submission_text: str = Field(..., min_length=1, description="제출 텍스트")

    model_config = {"populate_by_name": True}


class QuestSubmitResponse(BaseModel):
    """퀘스트 제출 응답."""

    status: QuestStatus = Field(..., description="평가 결과 (success, fail)")
    score: int = Field(..., ge=0, description="점수")
