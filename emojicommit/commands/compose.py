"""Command for composing a commit message interactively."""

from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console

from ..composer import CommitComposer, ComposeResult, Outcome
from ..keys import Key, KeyboardSource
from ..renderer import LiveRenderer, Renderer
from .base import EditorCommand, launch_editor


class ComposeMessageCommand(EditorCommand):
    """Command for writing COMMIT_EDITMSG through the interactive composer.

    This command handles:
    1. Running the type selection and message stages
    2. Writing the confirmed message over git's template
    3. Handing a draft to the external editor on Ctrl-E
    4. Notifying observers of the outcome

    Attributes:
        path (Path): The commit message file git is waiting on
        result (Optional[ComposeResult]): Outcome of the last run
    """

    def __init__(
        self,
        path: Path,
        editor: str,
        keys: Optional[Iterable[Key]] = None,
        renderer: Optional[Renderer] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(console)
        self.path = path
        self.editor = editor
        self.keys = keys if keys is not None else KeyboardSource()
        self.renderer = renderer or LiveRenderer(self.console)
        self.result: Optional[ComposeResult] = None

    def execute(self) -> int:
        self.result = CommitComposer(self.keys, self.renderer).run()

        if self.result.outcome is Outcome.ABORTED:
            for observer in self.observers:
                observer.on_session_aborted()
            return 1

        message = self.result.full_message
        if self.result.outcome is Outcome.DEFER_TO_EDITOR:
            template = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
            self.path.write_text(f"{message}\n{template}", encoding="utf-8")
            for observer in self.observers:
                observer.on_message_composed(message)
            return launch_editor(self.editor, self.path)

        self.path.write_text(f"{message}\n", encoding="utf-8")
        for observer in self.observers:
            observer.on_message_composed(message)
        return 0
