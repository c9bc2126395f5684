"""Tests for view formatting and the live renderer."""
import io

from rich.console import Console

from emojicommit.input_buffer import MarkedText
from emojicommit.models import CommitType, RuleResult
from emojicommit.renderer import (
    CompositionView,
    LiveRenderer,
    SelectionView,
    format_composition,
    format_selection,
    format_view,
)


def test_format_selection_marks_current_entry():
    view = SelectionView(entries=CommitType.all(), selected=CommitType.BUGFIX)
    lines = format_selection(view).plain.split("\n")
    assert lines == [
        "   💥  - Breaking",
        "   🎉  - Feature",
        "👉  🐛  - Bugfix",
        "   🔥  - Cleanup / Performance",
        "   🌹  - Other",
    ]


def test_format_composition():
    view = CompositionView(
        results=[
            RuleResult(description="Capitalize the subject line", passed=True),
            RuleResult(description="Do not end the subject line with a period", passed=False),
        ],
        hint="Enter: confirm",
        emoji="🐛",
        text=MarkedText("Fi", "x", "."),
    )
    text = format_composition(view)
    assert text.plain == (
        "✔ Capitalize the subject line\n"
        "✖ Do not end the subject line with a period\n"
        "\n"
        "Enter: confirm\n"
        "\n"
        "🐛  Fix."
    )
    styles = {str(span.style) for span in text.spans}
    assert "green" in styles
    assert "red" in styles
    assert "underline" in styles


def test_format_view_dispatches_on_type():
    view = SelectionView(entries=CommitType.all(), selected=CommitType.BREAKING)
    assert format_view(view).plain == format_selection(view).plain


def test_live_renderer_starts_and_stops():
    console = Console(file=io.StringIO(), force_terminal=True, width=80)
    renderer = LiveRenderer(console)
    view = SelectionView(entries=CommitType.all(), selected=CommitType.BREAKING)

    renderer.render(view)
    assert renderer.live is not None
    renderer.render(view)
    renderer.clear()
    assert renderer.live is None
    renderer.clear()

    assert "Breaking" in console.file.getvalue()
