"""Cursor-addressable text buffer used while composing a message."""
import unicodedata
from typing import NamedTuple

CURSOR_PLACEHOLDER = " "

WORD_LEFT_KEYS = ("b", "D")
WORD_RIGHT_KEYS = ("f", "C")


class MarkedText(NamedTuple):
    """Buffer content split around the cursor for display."""

    before: str
    cursor: str
    after: str

    def __str__(self) -> str:
        return f"{self.before}{self.cursor}{self.after}"


def is_control_char(c: str) -> bool:
    return len(c) == 1 and unicodedata.category(c) == "Cc"


class InputBuffer:
    """A single-line editable string with a cursor.

    Positions count code points, so multi-byte characters move the cursor
    by one. A control character passed to ``enter_control_mode_if`` arms a
    pending two-key sequence: the next inserted character is read as an
    editing command instead of text.
    """

    def __init__(self, content: str = ""):
        self.content = content
        self.cursor = len(content)
        self.pending_control = False

    def __len__(self) -> int:
        return len(self.content)

    def __str__(self) -> str:
        return self.content

    def insert(self, c: str) -> None:
        if self.pending_control:
            self.handle_control(c)
            return
        if self.cursor == len(self.content):
            self.content += c
        else:
            self.content = self.content[:self.cursor] + c + self.content[self.cursor:]
        self.cursor += len(c)

    def delete_forward(self) -> None:
        if self.cursor == len(self.content):
            return
        self.content = self.content[:self.cursor] + self.content[self.cursor + 1:]

    def delete_backward(self) -> None:
        if self.cursor == 0:
            return
        self.content = self.content[:self.cursor - 1] + self.content[self.cursor:]
        self.cursor -= 1

    def move_left(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_right(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.content))

    def move_word_left(self) -> None:
        position = self.cursor
        while position > 0 and self.content[position - 1].isspace():
            position -= 1
        while position > 0 and not self.content[position - 1].isspace():
            position -= 1
        self.cursor = position

    def move_word_right(self) -> None:
        position = self.cursor
        length = len(self.content)
        while position < length and self.content[position].isspace():
            position += 1
        while position < length and not self.content[position].isspace():
            position += 1
        self.cursor = position

    def enter_control_mode_if(self, c: str) -> bool:
        """Arm the pending control sequence if ``c`` is a control character."""
        if is_control_char(c):
            self.pending_control = True
        return self.pending_control

    def handle_control(self, c: str) -> None:
        """Consume the second key of a control sequence."""
        self.pending_control = False
        if c in WORD_LEFT_KEYS:
            self.move_word_left()
        elif c in WORD_RIGHT_KEYS:
            self.move_word_right()

    def render_with_cursor_marker(self) -> MarkedText:
        if self.cursor == len(self.content):
            return MarkedText(self.content, CURSOR_PLACEHOLDER, "")
        return MarkedText(
            self.content[:self.cursor],
            self.content[self.cursor],
            self.content[self.cursor + 1:],
        )

    def trimmed(self) -> str:
        return self.content.strip()
