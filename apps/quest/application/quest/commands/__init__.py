"""Quest Commands."""

from apps.quest.application.quest.commands.evaluate_submission import (
    EvaluateSubmissionCommand,
)

__all__ = ["EvaluateSubmissionCommand"]
