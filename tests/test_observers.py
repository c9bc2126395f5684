"""Tests for session observers."""
import io

from rich.console import Console

from emojicommit.models import CommitReport, ValidationReport
from emojicommit.observers import ConsoleLogObserver, FileLogObserver


def make_console():
    return Console(file=io.StringIO(), width=200)


def test_console_observer_commit_checked():
    console = make_console()
    observer = ConsoleLogObserver(console)

    observer.on_commit_checked(CommitReport(sha="0123456789", subject="🐛 Fix it"))
    observer.on_commit_checked(
        CommitReport(sha="abcdef0123", subject="fixed it", failed_rules=["Capitalize the subject line"])
    )

    output = console.file.getvalue()
    assert "0123456 🐛 Fix it" in output
    assert "abcdef0 fixed it" in output
    assert "- Capitalize the subject line" in output


def test_console_observer_summary():
    console = make_console()
    observer = ConsoleLogObserver(console)

    observer.on_validation_completed(ValidationReport(checked=3))
    failing = ValidationReport(
        checked=3, failures=[CommitReport(sha="abc", subject="x", failed_rules=["rule"])]
    )
    observer.on_validation_completed(failing)
    observer.on_session_aborted()
    observer.on_message_composed("🎉 Add parser")

    output = console.file.getvalue()
    assert "All 3 commits passed" in output
    assert "1 of 3 commits failed validation" in output
    assert "Aborted..." in output
    assert "Commit message: 🎉 Add parser" in output


def test_file_observer(tmp_path):
    log_file = tmp_path / "logs" / "session.log"
    observer = FileLogObserver(str(log_file))

    observer.on_message_composed("🎉 Add parser")
    observer.on_session_aborted()
    observer.on_commit_checked(
        CommitReport(sha="abcdef0123", subject="fixed it", failed_rules=["A", "B"])
    )
    observer.on_validation_completed(ValidationReport(checked=1))

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0].endswith(" - Composed commit message: 🎉 Add parser")
    assert lines[1].endswith(" - Commit message aborted by user")
    assert lines[2].endswith(" - Failed abcdef0 fixed it (A; B)")
    assert lines[3].endswith(" - Successfully validated 1 commits (0 failing)")
