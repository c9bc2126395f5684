"""Validation of existing commit messages in a revision range."""
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from git import Repo
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from git.objects import Commit

from .commit_message import CommitMessageValidator
from .models import CommitRecord, ValidationReport
from .observers import SessionObserver

EXCLUDE_PREFIX = "^"
MERGE_BASE_SEPARATOR = "..."
RANGE_SEPARATOR = ".."
DEFAULT_REVISION = "HEAD"

RESOLVE_ERRORS = (BadName, BadObject, ValueError, IndexError, GitCommandError)


class HistoryError(Exception):
    """A revision specifier or repository could not be read."""

    def __init__(self, spec: str, cause: Optional[Exception] = None):
        self.spec = spec
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot resolve '{spec}'{detail}")


class RangeMode(Enum):
    SINGLE = "single"
    RANGE = "range"
    MERGE_BASE = "merge_base"


def parse_spec(spec: str) -> Tuple[Optional[str], str, RangeMode]:
    """Split a specifier into ``(from, to, mode)``.

    ``a..b`` and ``a...b`` default either missing side to HEAD; a plain
    revision comes back as ``(None, rev, SINGLE)``.
    """
    for separator, mode in ((MERGE_BASE_SEPARATOR, RangeMode.MERGE_BASE), (RANGE_SEPARATOR, RangeMode.RANGE)):
        if separator in spec:
            start, end = spec.split(separator, 1)
            return start or DEFAULT_REVISION, end or DEFAULT_REVISION, mode
    return None, spec, RangeMode.SINGLE


class RevisionWalk:
    """Newest-first walk over everything reachable from the pushed tips and
    from none of the hidden commits."""

    def __init__(self, repo: Repo):
        self.repo = repo
        self.tips: List[str] = []
        self.hidden: List[str] = []

    def push(self, commit: Commit) -> None:
        if commit.hexsha not in self.tips:
            self.tips.append(commit.hexsha)

    def hide(self, commit: Commit) -> None:
        if commit.hexsha not in self.hidden:
            self.hidden.append(commit.hexsha)

    def __iter__(self) -> Iterator[Commit]:
        if not self.tips:
            return iter(())
        revisions = self.tips + [f"{EXCLUDE_PREFIX}{sha}" for sha in self.hidden]
        return self.repo.iter_commits(rev=revisions)


class HistoryValidator:
    """Resolves revision specifiers and checks each commit's message.

    All specifiers are resolved before the walk starts so that exclusions
    apply across every included range.
    """

    def __init__(
        self,
        repo_path: Union[str, Path] = ".",
        validator: Optional[CommitMessageValidator] = None,
        observers: Optional[List[SessionObserver]] = None,
    ):
        try:
            self.repo = Repo(repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise HistoryError(str(repo_path), e) from e
        self.validator = validator or CommitMessageValidator()
        self.observers: List[SessionObserver] = list(observers or [])

    def add_observer(self, observer: SessionObserver) -> None:
        self.observers.append(observer)

    def resolve(self, revision: str) -> Commit:
        return self.repo.commit(revision)

    def plan_walk(self, specs: Sequence[str]) -> Tuple[RevisionWalk, List[Commit]]:
        """Resolve every specifier into a walk plus any merge bases to add back."""
        walk = RevisionWalk(self.repo)
        merge_bases: List[Commit] = []
        for spec in specs:
            try:
                if spec.startswith(EXCLUDE_PREFIX):
                    walk.hide(self.resolve(spec[len(EXCLUDE_PREFIX):]))
                    continue
                start, end, mode = parse_spec(spec)
                if mode is RangeMode.SINGLE:
                    walk.push(self.resolve(end))
                    continue
                start_commit = self.resolve(start)
                end_commit = self.resolve(end)
                walk.push(end_commit)
                walk.hide(start_commit)
                if mode is RangeMode.MERGE_BASE:
                    merge_bases.extend(self.repo.merge_base(start_commit, end_commit))
            except RESOLVE_ERRORS as e:
                raise HistoryError(spec, e) from e
        return walk, merge_bases

    def fetch_commits(self, specs: Sequence[str]) -> List[CommitRecord]:
        walk, merge_bases = self.plan_walk(specs)
        try:
            commits = list(walk)
            seen = {commit.hexsha for commit in commits}
            extra = [base for base in merge_bases if base.hexsha not in seen]
            if extra:
                commits = sorted(commits + extra, key=lambda commit: commit.committed_date, reverse=True)
            return [CommitRecord(sha=commit.hexsha, message=_message_text(commit)) for commit in commits]
        except RESOLVE_ERRORS as e:
            raise HistoryError(" ".join(specs), e) from e

    def resolve_and_fetch(self, specs: Sequence[str]) -> List[str]:
        return [record.message for record in self.fetch_commits(specs)]

    def validate(self, specs: Sequence[str]) -> ValidationReport:
        """Check every commit in ``specs``; the report passes iff none fail."""
        report = ValidationReport()
        for record in self.fetch_commits(specs):
            commit_report = self.validator.report(record)
            report.checked += 1
            if not commit_report.passed:
                report.failures.append(commit_report)
            for observer in self.observers:
                observer.on_commit_checked(commit_report)
        for observer in self.observers:
            observer.on_validation_completed(report)
        return report


def _message_text(commit: Commit) -> str:
    message = commit.message
    if isinstance(message, bytes):
        return message.decode(commit.encoding or "utf-8", errors="replace")
    return message
