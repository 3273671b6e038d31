"""Domain Constants.

퀘스트 평가 정책 상수 - 환경변수로 변경되지 않습니다.
"""

# 통과 기준 점수 (score >= PASSING_SCORE 이면 success)
PASSING_SCORE = 5

# 점수 규칙별 배점
PUNCTUATION_POINTS = 1
PALINDROME_POINTS = 2
JOYFUL_WORD_POINTS = 1
REPETITION_POINTS = 3

PUNCTUATION_MARKS = frozenset(".,?!")
PALINDROME_MIN_LENGTH = 3

JOYFUL_WORDS = frozenset(
    {
        "Joyful",
        "Happy",
        "Vibrant",
        "Thrilled",
        "Euphoric",
        "Cheerful",
        "Delighted",
    }
)
JOYFUL_WORD_MAX_AWARDS = 3

# Placeholder 금칙어 (실서비스에서는 moderation API 사용)
DEFAULT_BLOCKED_WORDS = ("badword1", "badword2", "badword3")
