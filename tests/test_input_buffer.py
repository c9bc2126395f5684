"""Tests for the editable input buffer."""
import pytest

from emojicommit.input_buffer import CURSOR_PLACEHOLDER, InputBuffer, MarkedText, is_control_char


def make_buffer(content: str, cursor: int) -> InputBuffer:
    buffer = InputBuffer(content)
    buffer.cursor = cursor
    return buffer


def test_new_buffer_is_empty():
    buffer = InputBuffer()
    assert buffer.content == ""
    assert buffer.cursor == 0
    assert not buffer.pending_control


def test_insert_appends_and_splices():
    buffer = InputBuffer()
    for c in "Fix":
        buffer.insert(c)
    assert buffer.content == "Fix"
    assert buffer.cursor == 3

    buffer.cursor = 1
    buffer.insert("o")
    assert buffer.content == "Foix"
    assert buffer.cursor == 2


@pytest.mark.parametrize("cursor", [0, 2, 5])
def test_insert_then_backspace_restores_state(cursor):
    buffer = make_buffer("héllo", cursor)
    buffer.insert("🐛")
    buffer.delete_backward()
    assert buffer.content == "héllo"
    assert buffer.cursor == cursor


def test_multibyte_characters_count_as_one_position():
    buffer = InputBuffer()
    for c in "🎉é":
        buffer.insert(c)
    assert buffer.cursor == 2
    buffer.move_left()
    buffer.delete_forward()
    assert buffer.content == "🎉"
    assert buffer.cursor == 1


def test_delete_forward():
    buffer = make_buffer("abc", 1)
    buffer.delete_forward()
    assert buffer.content == "ac"
    assert buffer.cursor == 1

    buffer.cursor = 2
    buffer.delete_forward()
    assert buffer.content == "ac"


def test_delete_backward():
    buffer = make_buffer("abc", 0)
    buffer.delete_backward()
    assert buffer.content == "abc"

    buffer.cursor = 3
    buffer.delete_backward()
    assert buffer.content == "ab"
    assert buffer.cursor == 2


def test_char_motion_is_clamped():
    buffer = make_buffer("ab", 0)
    buffer.move_left()
    assert buffer.cursor == 0
    buffer.move_right()
    buffer.move_right()
    buffer.move_right()
    assert buffer.cursor == 2


def test_word_left():
    buffer = make_buffer("foo  bar", 8)
    buffer.move_word_left()
    assert buffer.cursor == 5
    buffer.move_word_left()
    assert buffer.cursor == 0
    buffer.move_word_left()
    assert buffer.cursor == 0


def test_word_right():
    buffer = make_buffer("foo  bar", 0)
    buffer.move_word_right()
    assert buffer.cursor == 3
    buffer.move_word_right()
    assert buffer.cursor == 8
    buffer.move_word_right()
    assert buffer.cursor == 8


def test_control_sequence_word_motion():
    buffer = make_buffer("foo bar", 7)
    assert buffer.enter_control_mode_if("\x1b")
    buffer.insert("b")
    assert buffer.cursor == 4
    assert buffer.content == "foo bar"
    assert not buffer.pending_control

    buffer.enter_control_mode_if("\x1b")
    buffer.insert("D")
    assert buffer.cursor == 0

    buffer.enter_control_mode_if("\x1b")
    buffer.insert("f")
    assert buffer.cursor == 3

    buffer.enter_control_mode_if("\x1b")
    buffer.insert("C")
    assert buffer.cursor == 7


def test_unknown_control_key_is_swallowed():
    buffer = make_buffer("foo", 3)
    buffer.enter_control_mode_if("\x1b")
    buffer.insert("x")
    assert buffer.content == "foo"
    assert not buffer.pending_control
    buffer.insert("x")
    assert buffer.content == "foox"


def test_printable_does_not_enter_control_mode():
    buffer = InputBuffer()
    assert not buffer.enter_control_mode_if("a")
    assert not buffer.pending_control
    assert is_control_char("\x1b")
    assert not is_control_char("b")


def test_render_with_cursor_marker():
    buffer = make_buffer("abc", 1)
    assert buffer.render_with_cursor_marker() == MarkedText("a", "b", "c")

    buffer.cursor = 3
    marked = buffer.render_with_cursor_marker()
    assert marked == MarkedText("abc", CURSOR_PLACEHOLDER, "")
    assert str(marked) == "abc "
    assert buffer.content == "abc"


def test_trimmed():
    assert make_buffer("  Fix bug \t", 0).trimmed() == "Fix bug"
