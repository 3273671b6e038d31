"""Keyword Content Moderator.

금칙어 포함 여부만 검사하는 단순 구현입니다.
운영 환경에서는 HttpContentModerator(외부 moderation API)로 교체합니다.
"""

from __future__ import annotations

import logging
from typing import Iterable

from apps.quest.application.quest.ports import ContentModerator
from apps.quest.domain.constants import DEFAULT_BLOCKED_WORDS

logger = logging.getLogger(__name__)


class KeywordContentModerator(ContentModerator):
    """대소문자 무시 부분 문자열 매칭."""

    def __init__(self, blocked_words: Iterable[str] = DEFAULT_BLOCKED_WORDS) -> None:
        self._blocked_words = tuple(word.lower() for word in blocked_words if word)

    async def is_disallowed(self, text: str) -> bool:
        lowered = text.lower()
        for word in self._blocked_words:
            if word in lowered:
                logger.debug("Text contains blocked word", extra={"blocked_word": word})
                return True

        logger.debug("Text does not contain blocked words")
        return False
