"""Quest DTOs."""

from apps.quest.application.quest.dto.submission import (
    CompletionKey,
    EvaluationReason,
    EvaluationResult,
    ScoreBreakdown,
    SubmissionRequest,
    UserProfile,
)

__all__ = [
    "CompletionKey",
    "EvaluationReason",
    "EvaluationResult",
    "ScoreBreakdown",
    "SubmissionRequest",
    "UserProfile",
]
