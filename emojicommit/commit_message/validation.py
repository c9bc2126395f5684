"""Commit message style rules.

Each rule is a total predicate over the message text: a rule that cannot
apply (empty message, missing subject) passes instead of failing.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..models import CommitType, RuleResult

IMPERATIVE_BLOCKLIST = (
    "adds", "added", "adding",
    "removes", "removed", "removing",
    "fixes", "fixed", "fixing",
    "changes", "changed", "changing",
)


def _lines(message: str) -> List[str]:
    if not message:
        return []
    lines = [line.rstrip("\r") for line in message.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


class ValidationRule(ABC):
    """Abstract base class for style rules.

    Rules compare equal by ``key``, never by their display text.
    """

    key: str = ""
    description: str = ""

    @abstractmethod
    def check(self, message: str) -> bool:
        """Return True if the message satisfies the rule."""
        pass

    def evaluate(self, message: str) -> RuleResult:
        return RuleResult(description=self.description, passed=self.check(message))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationRule):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


class BlankLineRule(ValidationRule):
    key = "subject-body-separation"
    description = "Separate subject from body with a blank line"

    def check(self, message: str) -> bool:
        lines = _lines(message)
        return len(lines) < 2 or lines[1] == ""


class SubjectLengthRule(ValidationRule):
    key = "subject-line-limit"

    def __init__(self, max_length: int = 50):
        self.max_length = max_length
        self.description = f"Limit the subject line to {max_length} characters"

    def check(self, message: str) -> bool:
        lines = _lines(message)
        subject = lines[0] if lines else ""
        return len(subject) <= self.max_length


class SubjectCapitalizationRule(ValidationRule):
    key = "subject-capitalization"
    description = "Capitalize the subject line"

    def check(self, message: str) -> bool:
        if not message:
            return True
        return message[0].isupper()


class SubjectPeriodRule(ValidationRule):
    key = "subject-punctuation"
    description = "Do not end the subject line with a period"

    def check(self, message: str) -> bool:
        return not message.endswith(".")


class ImperativeMoodRule(ValidationRule):
    key = "imperative-mood"
    description = "Use the imperative mood in the subject line"

    def check(self, message: str) -> bool:
        return not message.lower().startswith(IMPERATIVE_BLOCKLIST)


class BodyLineLengthRule(ValidationRule):
    """Listed for the checklist only; body wrapping is not enforced yet."""

    key = "body-wrapping"

    def __init__(self, max_length: int = 72):
        self.max_length = max_length
        self.description = f"Wrap the body at {max_length} characters"

    def check(self, message: str) -> bool:
        return True


class WhatAndWhyRule(ValidationRule):
    """Listed for the checklist only; cannot be checked mechanically."""

    key = "what-and-why"
    description = "Use the body to explain what and why vs. how"

    def check(self, message: str) -> bool:
        return True


class TypeEmojiRule(ValidationRule):
    key = "starting-emoji"

    def __init__(self):
        emojis = ", ".join(commit_type.emoji for commit_type in CommitType.all())
        self.description = f"Commit message has to begin with one of the following emojis: {emojis}"

    def check(self, message: str) -> bool:
        return any(message.startswith(commit_type.emoji) for commit_type in CommitType.all())


STANDARD_RULES: Tuple[ValidationRule, ...] = (
    BlankLineRule(),
    SubjectLengthRule(),
    SubjectCapitalizationRule(),
    SubjectPeriodRule(),
    ImperativeMoodRule(),
    BodyLineLengthRule(),
    WhatAndWhyRule(),
)

TYPE_EMOJI_RULE = TypeEmojiRule()


def strip_type_prefix(message: str) -> str:
    """Remove one leading ``"<emoji> "`` marker, if present."""
    for commit_type in CommitType.all():
        prefix = f"{commit_type.emoji} "
        if message.startswith(prefix):
            return message[len(prefix):]
    return message


def evaluate(message: str, rules: Sequence[ValidationRule] = STANDARD_RULES) -> List[RuleResult]:
    """Apply every rule to ``message`` in order."""
    return [rule.evaluate(message) for rule in rules]


def evaluate_with_type_prefix(message: str) -> List[RuleResult]:
    """Check for a leading commit-type emoji, then apply the standard rules
    to the message with that emoji removed."""
    return [TYPE_EMOJI_RULE.evaluate(message)] + evaluate(strip_type_prefix(message))
