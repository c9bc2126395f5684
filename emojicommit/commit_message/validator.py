"""Commit message validation."""
from typing import List, Tuple

from ..models import CommitRecord, CommitReport, RuleResult
from .validation import evaluate, evaluate_with_type_prefix


class CommitMessageValidator:
    """Validates commit messages against the emoji commit style."""

    def __init__(self, require_type_prefix: bool = True):
        self.require_type_prefix = require_type_prefix

    def check(self, message: str) -> List[RuleResult]:
        if self.require_type_prefix:
            return evaluate_with_type_prefix(message)
        return evaluate(message)

    def validate(self, message: str) -> Tuple[bool, List[str]]:
        """Validate a commit message.

        Returns:
            Tuple[bool, List[str]]: Whether every rule passed, and the
            descriptions of the rules that failed
        """
        failed = [result.description for result in self.check(message) if not result.passed]
        return not failed, failed

    def report(self, commit: CommitRecord) -> CommitReport:
        _, failed = self.validate(commit.message)
        return CommitReport(sha=commit.sha, subject=commit.subject, failed_rules=failed)
