"""
作答比對模組
"""

from .matcher import (
    HINT_TOKENS,
    is_hint_request,
    judge,
    judge_plain,
    judge_tone_number,
    normalize_submission,
    parse_reading,
)

__all__ = [
    "judge",
    "judge_plain",
    "judge_tone_number",
    "parse_reading",
    "normalize_submission",
    "is_hint_request",
    "HINT_TOKENS",
]
