"""Content moderation adapters."""

from apps.quest.infrastructure.moderation.http_moderator import HttpContentModerator
from apps.quest.infrastructure.moderation.keyword_moderator import (
    KeywordContentModerator,
)

__all__ = ["HttpContentModerator", "KeywordContentModerator"]
