"""Modal screens for worktree-vibes TUI."""

from typing import Optional, TypeVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

ResultType = TypeVar("ResultType")


class DialogScreen(ModalScreen[ResultType]):
    """Centered bordered box; subclasses fill in `#dialog`."""

    DEFAULT_CSS = """
    DialogScreen {
        align: center middle;
    }

    DialogScreen #dialog {
        width: 80%;
        height: auto;
        max-height: 90%;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }

    DialogScreen #dialog-body {
        width: 100%;
        height: auto;
        padding: 0 0 1 0;
    }

    DialogScreen #dialog-buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    DialogScreen Button {
        margin: 0 1;
    }
    """


class ConfirmScreen(DialogScreen[bool]):
    """Yes/no question. "No" has focus, so enter declines."""

    BINDINGS = [
        Binding("y", "answer(True)", "Yes"),
        Binding("n", "answer(False)", "No"),
        Binding("escape", "answer(False)", "Cancel", show=False),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.message, id="dialog-body", markup=False)
            with Horizontal(id="dialog-buttons"):
                yield Button("Yes", variant="error", id="yes")
                yield Button("No", variant="primary", id="no")

    def on_mount(self) -> None:
        self.query_one("#no", Button).focus()

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")


class PromptScreen(DialogScreen[Optional[str]]):
    """Single-line input. Dismisses with the text, or None when cancelled."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, prompt: str, default: str = ""):
        super().__init__()
        self.prompt = prompt
        self.default = default

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.prompt, id="dialog-body", markup=False)
            yield Input(value=self.default, id="prompt-input")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class LegendScreen(DialogScreen[None]):
    """Icon and key legend for the worktree picker."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("f1", "close", "Close", show=False),
    ]

    def __init__(self, legend: str):
        super().__init__()
        self.legend = legend

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.legend, id="dialog-body", markup=False)
            with Horizontal(id="dialog-buttons"):
                yield Button("Close", variant="primary", id="close")

    def action_close(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)
