"""Tests for the commit type taxonomy and report models."""
import pytest

from emojicommit.models import CommitRecord, CommitReport, CommitType, ValidationReport


def test_commit_type_order():
    assert CommitType.all() == (
        CommitType.BREAKING,
        CommitType.FEATURE,
        CommitType.BUGFIX,
        CommitType.PATCH,
        CommitType.OTHER,
    )
    assert CommitType.first() is CommitType.BREAKING
    assert CommitType.last() is CommitType.OTHER


def test_commit_type_attributes():
    assert CommitType.BREAKING.emoji == "💥"
    assert CommitType.BREAKING.bump_level == "major"
    assert CommitType.FEATURE.emoji == "🎉"
    assert CommitType.BUGFIX.emoji == "🐛"
    assert CommitType.PATCH.description == "Cleanup / Performance"
    assert CommitType.OTHER.emoji == "🌹"
    assert CommitType.OTHER.bump_level == "none"


def test_next_and_prev_are_partial():
    assert CommitType.BREAKING.prev() is None
    assert CommitType.OTHER.next() is None
    assert CommitType.BREAKING.next() is CommitType.FEATURE
    assert CommitType.OTHER.prev() is CommitType.PATCH


@pytest.mark.parametrize("commit_type", list(CommitType))
def test_next_and_prev_are_inverse(commit_type):
    previous = commit_type.prev()
    if previous is not None:
        assert previous.next() is commit_type
    following = commit_type.next()
    if following is not None:
        assert following.prev() is commit_type


def test_wraparound_cycle_returns_to_first():
    current = CommitType.first()
    for _ in range(4):
        current = current.prev() or CommitType.last()
    assert current is CommitType.FEATURE
    for _ in range(4):
        current = current.next() or CommitType.first()
    assert current is CommitType.first()


def test_all_is_restartable_and_sized():
    variants = CommitType.all()
    assert len(variants) == 5
    assert list(variants) == list(variants)


def test_by_index():
    assert CommitType.by_index(0) is CommitType.BREAKING
    assert CommitType.by_index(4) is CommitType.OTHER
    with pytest.raises(IndexError):
        CommitType.by_index(5)
    with pytest.raises(IndexError):
        CommitType.by_index(-1)


def test_commit_record_subject():
    record = CommitRecord(sha="abc", message="Subject line\n\nBody text\n")
    assert record.subject == "Subject line"
    assert CommitRecord(sha="abc", message="").subject == ""


def test_reports_pass_without_failures():
    assert CommitReport(sha="abc", subject="x").passed
    assert not CommitReport(sha="abc", subject="x", failed_rules=["rule"]).passed

    report = ValidationReport(checked=2)
    assert report.passed
    report.failures.append(CommitReport(sha="abc", subject="x", failed_rules=["rule"]))
    assert not report.passed
