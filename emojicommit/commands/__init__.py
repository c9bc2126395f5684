"""Editor commands using the Command Pattern.

git runs this program as its editor with the path of the file it wants
edited. The file name decides which command handles it:

    ```python
    from emojicommit.commands import command_for_path

    command = command_for_path(Path(".git/COMMIT_EDITMSG"), config)
    exit_code = command.execute()
    ```
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import Config
from .base import EditorCommand, EditorError, launch_editor, run_program
from .compose import ComposeMessageCommand
from .editor import ExternalEditorCommand
from .commit import GitCommitCommand, default_editor_command


class EditTarget(Enum):
    COMMIT_MESSAGE = "COMMIT_EDITMSG"
    REBASE_TODO = "git-rebase-todo"
    HUNK_EDIT = "addp-hunk-edit.diff"
    MERGE_MESSAGE = "MERGE_MSG"
    OTHER = ""

    @classmethod
    def detect(cls, path: Path) -> "EditTarget":
        for target in cls:
            if target.value and path.name == target.value:
                return target
        return cls.OTHER


def command_for_path(path: Path, config: Config, console: Optional[Console] = None) -> EditorCommand:
    """Pick the command for the file git asked us to edit."""
    if EditTarget.detect(path) is EditTarget.COMMIT_MESSAGE:
        return ComposeMessageCommand(path, config.get_editor(), console=console)
    return ExternalEditorCommand(path, config.get_editor(), console=console)


__all__ = [
    "EditorCommand",
    "EditorError",
    "EditTarget",
    "ComposeMessageCommand",
    "ExternalEditorCommand",
    "GitCommitCommand",
    "command_for_path",
    "default_editor_command",
    "launch_editor",
    "run_program",
]
