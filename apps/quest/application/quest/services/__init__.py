"""Quest Services (포트 의존성 없는 순수 로직)."""

from apps.quest.application.quest.services.condition_evaluator import (
    AccessConditionEvaluator,
)
from apps.quest.application.quest.services.submission_scorer import SubmissionScorer

__all__ = ["AccessConditionEvaluator", "SubmissionScorer"]
