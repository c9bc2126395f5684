"""Shared models for emoji-commit."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class CommitType(Enum):
    """Semantic commit categories in display order.

    ``next()`` and ``prev()`` return ``None`` past either end; callers that
    want to cycle wrap with ``first()`` / ``last()``.
    """

    BREAKING = ("💥", "Breaking", "major")
    FEATURE = ("🎉", "Feature", "minor")
    BUGFIX = ("🐛", "Bugfix", "patch")
    PATCH = ("🔥", "Cleanup / Performance", "patch")
    OTHER = ("🌹", "Other", "none")

    def __init__(self, emoji: str, description: str, bump_level: str):
        self.emoji = emoji
        self.description = description
        self.bump_level = bump_level

    @classmethod
    def all(cls) -> Tuple["CommitType", ...]:
        return tuple(cls)

    @classmethod
    def first(cls) -> "CommitType":
        return cls.all()[0]

    @classmethod
    def last(cls) -> "CommitType":
        return cls.all()[-1]

    @classmethod
    def by_index(cls, index: int) -> "CommitType":
        """Return the variant at ``index`` in declaration order.

        Raises:
            IndexError: If ``index`` is negative or past the last variant
        """
        variants = cls.all()
        if index < 0 or index >= len(variants):
            raise IndexError(f"No commit type at index {index}")
        return variants[index]

    @property
    def index(self) -> int:
        return self.all().index(self)

    def next(self) -> Optional["CommitType"]:
        variants = self.all()
        position = self.index + 1
        return variants[position] if position < len(variants) else None

    def prev(self) -> Optional["CommitType"]:
        position = self.index - 1
        return self.all()[position] if position >= 0 else None


@dataclass(frozen=True)
class CommitRecord:
    sha: str
    message: str

    @property
    def subject(self) -> str:
        lines = self.message.splitlines()
        return lines[0] if lines else ""


class RuleResult(BaseModel):
    description: str
    passed: bool


class CommitReport(BaseModel):
    sha: str
    subject: str
    failed_rules: List[str] = Field(default_factory=list, description="Labels of the rules the message broke")

    @property
    def passed(self) -> bool:
        return not self.failed_rules


class ValidationReport(BaseModel):
    checked: int = 0
    failures: List[CommitReport] = Field(default_factory=list, description="Commits with at least one failing rule")

    @property
    def passed(self) -> bool:
        return not self.failures
