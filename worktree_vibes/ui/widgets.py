"""Custom widgets for worktree-vibes TUI."""

from textual.app import ComposeResult, RenderResult
from textual.events import Click
from textual.reactive import reactive
from textual.widgets import Header
from textual.widgets._header import HeaderIcon, HeaderTitle, HeaderClockSpace
from rich.text import Text

from worktree_vibes.__version__ import __version__
from worktree_vibes.constants import SYMBOL_MARKED


class StatusBadge(HeaderClockSpace):
    """Shows the number of worktrees marked for deletion and the version, in place of the clock."""

    DEFAULT_CSS = """
    StatusBadge {
        width: auto;
        dock: right;
        padding: 0 1;
        background: $foreground 5%;
        color: $text;
        text-align: center;
        text-opacity: 85%;
    }
    """

    marked = reactive(0, layout=True)

    def render(self) -> RenderResult:
        text = Text()
        if self.marked:
            text.append(f"{SYMBOL_MARKED} {self.marked}  ", style="bold red")
        text.append(f"v{__version__}")
        return text


class PickerHeader(Header):
    """Header that doesn't expand on click and carries a StatusBadge."""

    def compose(self) -> ComposeResult:
        yield HeaderIcon().data_bind(Header.icon)
        yield HeaderTitle()
        yield StatusBadge()

    def set_marked(self, count: int) -> None:
        self.query_one(StatusBadge).marked = count

    def on_click(self, event: Click) -> None:
        # Header toggles its tall mode on click
        event.stop()
