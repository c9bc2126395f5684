"""Observer pattern for composer sessions and history validation."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import CommitReport, ValidationReport


class SessionObserver(ABC):
    """Abstract base class for session observers."""

    @abstractmethod
    def on_message_composed(self, message: str) -> None:
        """Called when a commit message is written."""
        pass

    @abstractmethod
    def on_session_aborted(self) -> None:
        """Called when the user cancels the composer."""
        pass

    @abstractmethod
    def on_commit_checked(self, report: CommitReport) -> None:
        """Called after one historical commit has been validated."""
        pass

    @abstractmethod
    def on_validation_completed(self, report: ValidationReport) -> None:
        """Called when every commit in the requested range has been validated."""
        pass


class ConsoleLogObserver(SessionObserver):
    """Observer that logs session events to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_message_composed(self, message: str) -> None:
        self.console.print(f"[green]Commit message: {escape(message)}[/green]")

    def on_session_aborted(self) -> None:
        self.console.print("[yellow]Aborted...[/yellow]")

    def on_commit_checked(self, report: CommitReport) -> None:
        short_sha = report.sha[:7]
        if report.passed:
            self.console.print(f"[green]✔ {short_sha} {escape(report.subject)}[/green]")
            return
        self.console.print(f"[red]✖ {short_sha} {escape(report.subject)}[/red]")
        for rule in report.failed_rules:
            self.console.print(f"    [red]- {escape(rule)}[/red]")

    def on_validation_completed(self, report: ValidationReport) -> None:
        if report.passed:
            self.console.print(f"\n[green]All {report.checked} commits passed[/green]")
        else:
            self.console.print(
                f"\n[red]{len(report.failures)} of {report.checked} commits failed validation[/red]"
            )


class FileLogObserver(SessionObserver):
    """Observer that logs session events to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_message_composed(self, message: str) -> None:
        self._log(f"Composed commit message: {message}")

    def on_session_aborted(self) -> None:
        self._log("Commit message aborted by user")

    def on_commit_checked(self, report: CommitReport) -> None:
        status = "Passed" if report.passed else "Failed"
        line = f"{status} {report.sha[:7]} {report.subject}"
        if report.failed_rules:
            line += f" ({'; '.join(report.failed_rules)})"
        self._log(line)

    def on_validation_completed(self, report: ValidationReport) -> None:
        status = "Successfully validated" if report.passed else "Failed to validate"
        self._log(f"{status} {report.checked} commits ({len(report.failures)} failing)")
