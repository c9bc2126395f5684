"""Two-stage interactive commit message composer.

Stage one picks a commit type, stage two edits the message text while the
rule checklist is recomputed after every key. A view is rendered after each
handled key and before the next one is read.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .commit_message import evaluate
from .input_buffer import InputBuffer
from .keys import Key, KeyKind
from .models import CommitType
from .renderer import CompositionView, Renderer, SelectionView

KEY_BINDING_HINT = "Enter: confirm   Ctrl-E: open in editor   Ctrl-C: abort"


class Stage(Enum):
    SELECTING = "selecting"
    COMPOSING = "composing"
    ABORTED = "aborted"
    CONFIRMED = "confirmed"


class Outcome(Enum):
    ABORTED = "aborted"
    CONFIRMED = "confirmed"
    DEFER_TO_EDITOR = "defer_to_editor"


@dataclass(frozen=True)
class ComposeResult:
    outcome: Outcome
    emoji: Optional[str] = None
    message: Optional[str] = None

    @property
    def full_message(self) -> str:
        """The message with its type emoji, as written to the commit file."""
        return f"{self.emoji} {self.message or ''}".rstrip()


class CommitComposer:
    """Drives type selection and message editing from a key stream."""

    def __init__(self, keys: Iterable[Key], renderer: Renderer):
        self.keys: Iterator[Key] = iter(keys)
        self.renderer = renderer
        self.stage = Stage.SELECTING
        self.selected = CommitType.first()
        self.buffer = InputBuffer()
        self.defer_to_editor = False

    def run(self) -> ComposeResult:
        emoji = self.select_type()
        if emoji is None:
            return ComposeResult(Outcome.ABORTED)
        message = self.compose_message(emoji)
        if message is None:
            return ComposeResult(Outcome.ABORTED, emoji=emoji)
        if self.defer_to_editor:
            return ComposeResult(Outcome.DEFER_TO_EDITOR, emoji=emoji, message=message)
        return ComposeResult(Outcome.CONFIRMED, emoji=emoji, message=message)

    def select_type(self) -> Optional[str]:
        """Run the selection stage; return the chosen emoji or None on abort."""
        self.stage = Stage.SELECTING
        self.selected = CommitType.first()
        try:
            self.renderer.render(self.selection_view())
            for key in self.keys:
                self.handle_selection_key(key)
                if self.stage is not Stage.SELECTING:
                    break
                self.renderer.render(self.selection_view())
        finally:
            self.renderer.clear()
        if self.stage is Stage.SELECTING:
            # key stream ended without a decision
            self.stage = Stage.ABORTED
        if self.stage is Stage.ABORTED:
            return None
        return self.selected.emoji

    def handle_selection_key(self, key: Key) -> None:
        if key.kind is KeyKind.UP or (key.kind is KeyKind.CHAR and key.char == "k"):
            self.selected = self.selected.prev() or CommitType.last()
        elif key.kind is KeyKind.DOWN or (key.kind is KeyKind.CHAR and key.char == "j"):
            self.selected = self.selected.next() or CommitType.first()
        elif key.kind is KeyKind.CHAR and key.char and len(key.char) == 1 and key.char in "123456789":
            try:
                self.selected = CommitType.by_index(int(key.char) - 1)
            except IndexError:
                pass
        elif key.kind is KeyKind.ENTER:
            self.stage = Stage.COMPOSING
        elif key.is_ctrl("c"):
            self.stage = Stage.ABORTED

    def compose_message(self, emoji: str) -> Optional[str]:
        """Run the editing stage; return the trimmed text or None on abort."""
        self.stage = Stage.COMPOSING
        self.buffer = InputBuffer()
        self.defer_to_editor = False
        try:
            self.renderer.render(self.composition_view(emoji))
            for key in self.keys:
                self.handle_composition_key(key)
                if self.stage is not Stage.COMPOSING:
                    break
                self.renderer.render(self.composition_view(emoji))
        finally:
            self.renderer.clear()
        if self.stage is Stage.COMPOSING:
            self.stage = Stage.ABORTED
        if self.stage is Stage.ABORTED:
            return None
        return self.buffer.trimmed()

    def handle_composition_key(self, key: Key) -> None:
        if key.kind is KeyKind.CHAR and key.char:
            self.buffer.insert(key.char)
        elif key.kind is KeyKind.BACKSPACE:
            self.buffer.delete_backward()
        elif key.kind is KeyKind.DELETE:
            self.buffer.delete_forward()
        elif key.kind is KeyKind.LEFT:
            self.buffer.move_left()
        elif key.kind is KeyKind.RIGHT:
            self.buffer.move_right()
        elif key.kind is KeyKind.ALT:
            self.buffer.enter_control_mode_if("\x1b")
            if key.char is not None:
                self.buffer.insert(key.char)
        elif key.kind is KeyKind.ENTER:
            # an empty message cannot be confirmed, only handed to the editor
            if self.buffer.trimmed():
                self.stage = Stage.CONFIRMED
        elif key.is_ctrl("c"):
            self.stage = Stage.ABORTED
        elif key.is_ctrl("e"):
            self.defer_to_editor = True
            self.stage = Stage.CONFIRMED

    def selection_view(self) -> SelectionView:
        return SelectionView(entries=CommitType.all(), selected=self.selected)

    def composition_view(self, emoji: str) -> CompositionView:
        return CompositionView(
            results=evaluate(self.buffer.content),
            hint=KEY_BINDING_HINT,
            emoji=emoji,
            text=self.buffer.render_with_cursor_marker(),
        )
