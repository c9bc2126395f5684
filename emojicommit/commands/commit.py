"""Command for running git commit with this program as its editor."""

import os
import shlex
import sys
from typing import Optional, Sequence

from rich.console import Console

from .base import EditorCommand, run_program


def default_editor_command() -> str:
    """Shell command git should run to reach this program."""
    return f"{shlex.quote(sys.executable)} -m emojicommit"


class GitCommitCommand(EditorCommand):
    """Re-invokes ``git commit`` with GIT_EDITOR pointing back at us."""

    def __init__(
        self,
        git_command: str = "git",
        args: Sequence[str] = (),
        editor_command: Optional[str] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(console)
        self.git_command = git_command
        self.args = list(args)
        self.editor_command = editor_command or default_editor_command()

    def execute(self) -> int:
        env = {**os.environ, "GIT_EDITOR": self.editor_command}
        return run_program([self.git_command, "commit", *self.args], env=env)
