"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from apps.quest.application.quest.commands.evaluate_submission import (
    EvaluateSubmissionCommand,
)
from apps.quest.application.quest.dto import SubmissionRequest, UserProfile
from apps.quest.application.quest.services import (
    AccessConditionEvaluator,
    SubmissionScorer,
)
from apps.quest.infrastructure.persistence_memory import InMemoryCompletionLedger


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def high_scoring_text() -> str:
    """6점 텍스트 (구두점 1 + 회문 2 + 긍정 단어 3)."""
    return "Aaa mmm Joyful Happy Vibrant Thrilled Euphoric Cheerful Delighted?"


@pytest.fixture
def claimed_at() -> datetime:
    """기준 클레임 시각 (UTC)."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_request(claimed_at: datetime) -> Callable[..., SubmissionRequest]:
    """SubmissionRequest 팩토리."""

    def _make(
        *,
        text: str = "test",
        conditions: tuple[Any, ...] = (),
        level: int = 5,
        owned_assets: frozenset[str] = frozenset(),
        quest_id: UUID | None = None,
        user_id: UUID | None = None,
        claimed: datetime | None = None,
    ) -> SubmissionRequest:
        return SubmissionRequest(
            quest_id=quest_id or uuid4(),
            user_id=user_id or uuid4(),
            claimed_at=claimed or claimed_at,
            access_conditions=conditions,
            user_profile=UserProfile(level=level, owned_assets=owned_assets),
            submission_text=text,
        )

    return _make


# ============================================================
# Mock Fixtures
# ============================================================


@pytest.fixture
def mock_ledger() -> AsyncMock:
    """Mock CompletionLedger."""
    ledger = AsyncMock()
    ledger.contains = AsyncMock(return_value=False)
    ledger.reserve_if_absent = AsyncMock(return_value=True)
    return ledger


@pytest.fixture
def mock_moderator() -> AsyncMock:
    """Mock ContentModerator (clean)."""
    moderator = AsyncMock()
    moderator.is_disallowed = AsyncMock(return_value=False)
    return moderator


@pytest.fixture
def memory_ledger() -> InMemoryCompletionLedger:
    """실제 in-memory ledger."""
    return InMemoryCompletionLedger()


@pytest.fixture
def command(
    memory_ledger: InMemoryCompletionLedger,
    mock_moderator: AsyncMock,
) -> EvaluateSubmissionCommand:
    """in-memory ledger + clean moderator Command."""
    return EvaluateSubmissionCommand(
        ledger=memory_ledger,
        moderator=mock_moderator,
        condition_evaluator=AccessConditionEvaluator(),
        scorer=SubmissionScorer(),
    )
