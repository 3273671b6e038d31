"""SubmissionScorer.

제출 텍스트의 휴리스틱 점수를 계산합니다.

규칙 (서로 독립, 합산):
    - 구두점 (. , ? !) 포함          → +1
    - 3자 이상 회문 토큰 (첫 매칭만)   → +2
    - 긍정 단어 토큰 (최대 3회)        → +1 each
    - 연속 반복 단어 (1회만)           → +3
"""

from __future__ import annotations

import logging
import re

from apps.quest.application.quest.dto import ScoreBreakdown
from apps.quest.domain.constants import (
    JOYFUL_WORD_MAX_AWARDS,
    JOYFUL_WORD_POINTS,
    JOYFUL_WORDS,
    PALINDROME_MIN_LENGTH,
    PALINDROME_POINTS,
    PUNCTUATION_MARKS,
    PUNCTUATION_POINTS,
    REPETITION_POINTS,
)

logger = logging.getLogger(__name__)

_REPEATED_WORD = re.compile(r"\b(\w+)\b(?:\s+\1\b)+")


class SubmissionScorer:
    """제출 텍스트 점수 계산기 (순수 함수)."""

    def score(self, text: str) -> ScoreBreakdown:
        """규칙별 점수를 계산합니다.

        Args:
            text: 제출 텍스트

        Returns:
            규칙별 점수 내역 (total로 합계 조회)
        """
        tokens = text.split()
        breakdown = ScoreBreakdown(
            punctuation=self.score_punctuation(text),
            palindrome=self.score_palindrome(tokens),
            joyful_words=self.score_joyful_words(tokens),
            repetition=self.score_repetition(text),
        )

        for rule in ("punctuation", "palindrome", "joyful_words", "repetition"):
            points = getattr(breakdown, rule)
            if points:
                logger.debug("Score rule awarded", extra={"rule": rule, "points": points})

        return breakdown

    def score_punctuation(self, text: str) -> int:
        if any(char in PUNCTUATION_MARKS for char in text):
            return PUNCTUATION_POINTS
        return 0

    def score_palindrome(self, tokens: list[str]) -> int:
        for token in tokens:
            if len(token) >= PALINDROME_MIN_LENGTH and token == token[::-1]:
                return PALINDROME_POINTS
        return 0

    def score_joyful_words(self, tokens: list[str]) -> int:
        awards = sum(1 for token in tokens if token in JOYFUL_WORDS)
        return min(awards, JOYFUL_WORD_MAX_AWARDS) * JOYFUL_WORD_POINTS

    def score_repetition(self, text: str) -> int:
        if _REPEATED_WORD.search(text):
            return REPETITION_POINTS
        return 0
