"""Command for delegating a file to the external editor."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from .base import EditorCommand, launch_editor


class ExternalEditorCommand(EditorCommand):
    """Opens rebase todo lists, hunk edits and merge messages unchanged in
    the user's editor."""

    def __init__(self, path: Path, editor: str, console: Optional[Console] = None):
        super().__init__(console)
        self.path = path
        self.editor = editor

    def execute(self) -> int:
        return launch_editor(self.editor, self.path)
