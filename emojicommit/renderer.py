"""Terminal presentation of composer views."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .input_buffer import MarkedText
from .models import CommitType, RuleResult

POINTER = "👉  "
NO_POINTER = "   "
PASS_MARK = "✔"
FAIL_MARK = "✖"


@dataclass(frozen=True)
class SelectionView:
    entries: Tuple[CommitType, ...]
    selected: CommitType


@dataclass(frozen=True)
class CompositionView:
    results: List[RuleResult]
    hint: str
    emoji: str
    text: MarkedText


View = Union[SelectionView, CompositionView]


class Renderer(ABC):
    """Abstract base class for view renderers."""

    @abstractmethod
    def render(self, view: View) -> None:
        """Replace whatever was drawn last with ``view``."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Erase the last drawn view."""
        pass


def format_selection(view: SelectionView) -> Text:
    text = Text()
    for position, commit_type in enumerate(view.entries):
        if position:
            text.append("\n")
        pointer = POINTER if commit_type is view.selected else NO_POINTER
        text.append(f"{pointer}{commit_type.emoji}  - {commit_type.description}")
    return text


def format_result(result: RuleResult) -> Text:
    if result.passed:
        return Text(f"{PASS_MARK} {result.description}", style="green")
    return Text(f"{FAIL_MARK} {result.description}", style="red")


def format_composition(view: CompositionView) -> Text:
    text = Text()
    for result in view.results:
        text.append_text(format_result(result))
        text.append("\n")
    text.append("\n")
    text.append(view.hint, style="dim")
    text.append("\n\n")
    text.append(f"{view.emoji}  {view.text.before}")
    text.append(view.text.cursor, style="underline")
    text.append(view.text.after)
    return text


def format_view(view: View) -> Text:
    if isinstance(view, SelectionView):
        return format_selection(view)
    return format_composition(view)


class LiveRenderer(Renderer):
    """Redraws views in place on stderr using a transient rich Live display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.live: Optional[Live] = None

    def render(self, view: View) -> None:
        if self.live is None:
            self.live = Live(console=self.console, transient=True, auto_refresh=False)
            self.live.start()
        self.live.update(format_view(view), refresh=True)

    def clear(self) -> None:
        if self.live is not None:
            self.live.stop()
            self.live = None
