"""Base command class for editor invocations.

Each write target git can hand to the editor maps to a command whose
``execute()`` returns the process exit code.
"""

import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from ..observers import SessionObserver


class EditorError(Exception):
    """An external program could not be started."""


def run_program(args: Sequence[str], env: Optional[dict] = None) -> int:
    """Run a program attached to the terminal and return its exit code.

    Raises:
        EditorError: If the executable cannot be found or started
    """
    try:
        return subprocess.run(list(args), env=env).returncode
    except OSError as e:
        raise EditorError(f"Cannot launch '{args[0]}': {e}") from e


def launch_editor(editor: str, path: Path) -> int:
    """Open ``path`` in ``editor``, which may carry its own arguments."""
    args = shlex.split(editor)
    if not args:
        raise EditorError("No editor configured")
    return run_program(args + [str(path)])


class EditorCommand(ABC):
    """Abstract base class for editor commands.

    Attributes:
        console (Console): Rich console for output
        observers (List[SessionObserver]): List of observers to notify
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize the command.

        Args:
            console: Optional Rich console for output
        """
        self.console = console or Console(stderr=True)
        self.observers: List[SessionObserver] = []

    def add_observer(self, observer: SessionObserver) -> None:
        """Add an observer to be notified of command execution.

        Args:
            observer: The observer to add
        """
        self.observers.append(observer)

    def remove_observer(self, observer: SessionObserver) -> None:
        """Remove an observer from the notification list.

        Args:
            observer: The observer to remove
        """
        self.observers.remove(observer)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Exit code to hand back to git
        """
        pass
