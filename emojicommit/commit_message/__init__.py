"""Commit message rules and validation package."""

from .validation import (
    STANDARD_RULES,
    TYPE_EMOJI_RULE,
    ValidationRule,
    evaluate,
    evaluate_with_type_prefix,
    strip_type_prefix,
)
from .validator import CommitMessageValidator

__all__ = [
    'STANDARD_RULES',
    'TYPE_EMOJI_RULE',
    'ValidationRule',
    'evaluate',
    'evaluate_with_type_prefix',
    'strip_type_prefix',
    'CommitMessageValidator',
]
