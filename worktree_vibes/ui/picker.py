"""Generic fuzzy picker screen: a prompt over a filterable, multi-select result list."""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Set, Tuple

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.fuzzy import Matcher
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Input, Static

from worktree_vibes.constants import SYMBOL_SELECTED, ColumnDefinition
from worktree_vibes.ui.widgets import PickerHeader


@dataclass(frozen=True)
class PickerEntry:
    """One row of a picker."""

    key: str  # Stable identity across refreshes
    value: Any
    ordinal: str  # Text the prompt is fuzzy-matched against
    cells: Tuple[Any, ...]  # Renderables, one per column


class PickerScreen(Screen):
    """Prompt input above a results table.

    The prompt has focus in insert mode; the table has focus in normal mode.
    Rows are always rebuilt from entries, never edited in place.
    """

    DEFAULT_CSS = """
    PickerScreen #picker-title {
        height: 1;
        padding: 0 1;
        background: $panel;
        text-style: bold;
    }

    PickerScreen #prompt {
        dock: top;
    }

    PickerScreen DataTable {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Select", priority=True),
        Binding("tab", "toggle_selection", "Multi-select", priority=True),
        Binding("up", "cursor_up", "Up", show=False, priority=True),
        Binding("down", "cursor_down", "Down", show=False, priority=True),
        Binding("escape", "escape", "Normal mode / Close", priority=True),
        Binding("i", "insert_mode", "Insert mode", show=False),
    ]

    def __init__(
        self,
        picker_title: str,
        columns: Sequence[ColumnDefinition],
        entries: Sequence[PickerEntry] = (),
    ):
        super().__init__()
        self.picker_title = picker_title
        self.columns = list(columns)
        self.entries: List[PickerEntry] = list(entries)
        self._visible: List[PickerEntry] = []
        self._selected: Set[str] = set()

    def compose(self) -> ComposeResult:
        yield PickerHeader(icon="")
        yield Static(self.picker_title, id="picker-title", markup=False)
        yield Input(placeholder="Filter...", id="prompt")
        yield DataTable(id="results", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_column(" ", key="selected")
        for col in self.columns:
            table.add_column(col.label, width=col.width or None, key=col.key)
        self._render_rows()
        self.query_one("#prompt", Input).focus()

    # Picker capability

    def refresh_entries(self, entries: Sequence[PickerEntry], keep_prompt: bool = True) -> None:
        """Replace all entries and re-render.

        Args:
            entries: New entries
            keep_prompt: Keep the current prompt text (otherwise clear it)
        """
        self.entries = list(entries)
        keys = {entry.key for entry in self.entries}
        self._selected &= keys
        if not keep_prompt:
            self.query_one("#prompt", Input).value = ""
        self._render_rows()

    def selected_entry(self) -> Optional[PickerEntry]:
        """Entry under the cursor, if any."""
        table = self.query_one(DataTable)
        row = table.cursor_row
        if row is None or not (0 <= row < len(self._visible)):
            return None
        return self._visible[row]

    def multi_selection(self) -> List[PickerEntry]:
        """Entries selected with tab, in display order (possibly empty)."""
        return [entry for entry in self.entries if entry.key in self._selected]

    def clear_selection(self) -> None:
        """Drop the multi-selection; takes effect on the next render."""
        self._selected.clear()

    def close(self) -> None:
        self.dismiss(None)

    # Rendering

    def _filtered(self) -> List[PickerEntry]:
        query = self.query_one("#prompt", Input).value.strip()
        if not query:
            return list(self.entries)

        matcher = Matcher(query)
        scored = []
        for index, entry in enumerate(self.entries):
            score = matcher.match(entry.ordinal)
            if score > 0:
                scored.append((-score, index, entry))
        scored.sort(key=lambda item: (item[0], item[1]))
        return [entry for _, _, entry in scored]

    def _render_rows(self) -> None:
        table = self.query_one(DataTable)
        saved_row = table.cursor_row or 0
        table.clear()

        self._visible = self._filtered()
        for index, entry in enumerate(self._visible):
            marker = Text(SYMBOL_SELECTED if entry.key in self._selected else " ", style="bold")
            table.add_row(marker, *entry.cells, key=str(index))

        if self._visible:
            table.move_cursor(row=min(saved_row, len(self._visible) - 1))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "prompt":
            self._render_rows()

    # Actions

    def action_confirm(self) -> None:
        entry = self.selected_entry()
        if entry is not None:
            self.dismiss(entry.value)

    def action_toggle_selection(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        if entry.key in self._selected:
            self._selected.discard(entry.key)
        else:
            self._selected.add(entry.key)
        self._render_rows()
        self.action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one(DataTable).action_cursor_up()

    def action_cursor_down(self) -> None:
        self.query_one(DataTable).action_cursor_down()

    def action_escape(self) -> None:
        prompt = self.query_one("#prompt", Input)
        if prompt.has_focus:
            self.query_one(DataTable).focus()
        else:
            self.close()

    def action_insert_mode(self) -> None:
        self.query_one("#prompt", Input).focus()
