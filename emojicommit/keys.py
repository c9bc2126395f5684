"""Keyboard events read from the terminal."""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

import click

ESC = "\x1b"


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    CTRL = "ctrl"
    ALT = "alt"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def ctrl(cls, letter: str) -> "Key":
        return cls(KeyKind.CTRL, letter)

    def is_ctrl(self, letter: str) -> bool:
        return self.kind is KeyKind.CTRL and self.char == letter


ESCAPE_SEQUENCES = {
    "\x1b[A": Key(KeyKind.UP),
    "\x1b[B": Key(KeyKind.DOWN),
    "\x1b[C": Key(KeyKind.RIGHT),
    "\x1b[D": Key(KeyKind.LEFT),
    "\x1bOA": Key(KeyKind.UP),
    "\x1bOB": Key(KeyKind.DOWN),
    "\x1bOC": Key(KeyKind.RIGHT),
    "\x1bOD": Key(KeyKind.LEFT),
    "\x1b[3~": Key(KeyKind.DELETE),
    # Alt/Ctrl + arrow act as word motion
    "\x1b[1;3D": Key(KeyKind.ALT, "b"),
    "\x1b[1;5D": Key(KeyKind.ALT, "b"),
    "\x1b[1;3C": Key(KeyKind.ALT, "f"),
    "\x1b[1;5C": Key(KeyKind.ALT, "f"),
}


def _decode_char(c: str) -> Key:
    if c in ("\r", "\n"):
        return Key(KeyKind.ENTER)
    if c in ("\x7f", "\x08"):
        return Key(KeyKind.BACKSPACE)
    if c == ESC:
        return Key(KeyKind.ALT)
    if ord(c) < 0x20:
        return Key.ctrl(chr(ord(c) + 0x60))
    if c.isprintable():
        return Key(KeyKind.CHAR, c)
    return Key(KeyKind.OTHER, c)


def decode_keys(raw: str) -> List[Key]:
    """Decode one raw terminal read into key events.

    Escape sequences decode to a single key. Anything else (typically a
    paste) decodes character by character.
    """
    if not raw:
        return []
    if raw.startswith(ESC):
        if raw in ESCAPE_SEQUENCES:
            return [ESCAPE_SEQUENCES[raw]]
        if len(raw) == 1:
            return [Key(KeyKind.ALT)]
        if len(raw) == 2 and raw[1].isprintable():
            return [Key(KeyKind.ALT, raw[1])]
        return [Key(KeyKind.OTHER, raw)]
    return [_decode_char(c) for c in raw]


class KeyboardSource:
    """Endless stream of key events from the controlling terminal."""

    def __init__(self, getchar: Callable[[], str] = click.getchar):
        self.getchar = getchar

    def read(self) -> List[Key]:
        try:
            return decode_keys(self.getchar())
        except KeyboardInterrupt:
            return [Key.ctrl("c")]
        except EOFError:
            return [Key.ctrl("d")]

    def __iter__(self) -> Iterator[Key]:
        while True:
            keys = self.read()
            if not keys:
                # an empty read means the terminal reached end of file
                return
            yield from keys
