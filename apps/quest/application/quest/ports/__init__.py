"""Quest Ports."""

from apps.quest.application.quest.ports.completion_ledger import CompletionLedger
from apps.quest.application.quest.ports.content_moderator import ContentModerator

__all__ = ["CompletionLedger", "ContentModerator"]
