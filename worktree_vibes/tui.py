"""Interactive TUI for worktree-vibes using Textual."""

from typing import List, Optional, Sequence

from rich.markup import escape
from rich.text import Text
from textual.app import App
from textual.binding import Binding

from .__version__ import __version__
from .constants import BRANCH_COLUMNS, LEGEND_TEXT, WORKTREE_COLUMNS
from .core import WorktreeVibes
from .formatters import (
    format_candidate,
    format_worktree_flags,
    format_worktree_target,
    worktree_ordinal,
)
from .logging_config import get_logger
from .models.branch import BranchCandidate
from .models.outcome import FlowOutcome, OutcomeStatus
from .models.worktree import WorktreeRecord
from .ui.picker import PickerEntry, PickerScreen
from .ui.screens import ConfirmScreen, LegendScreen, PromptScreen
from .ui.widgets import PickerHeader

logger = get_logger(__name__)


def make_worktree_entries(session: WorktreeVibes, records: Sequence[WorktreeRecord]) -> List[PickerEntry]:
    """Build picker rows for worktrees, tagging marked ones."""
    entries = []
    for record in records:
        path_style = "bold red" if session.is_marked(record) else "bold"
        entries.append(
            PickerEntry(
                key=record.path,
                value=record,
                ordinal=worktree_ordinal(record),
                cells=(
                    Text(format_worktree_flags(record, session.is_marked(record))),
                    Text(record.path, style=path_style),
                    Text(format_worktree_target(record), style="dim"),
                ),
            )
        )
    return entries


def make_branch_entries(candidates: Sequence[BranchCandidate]) -> List[PickerEntry]:
    """Build picker rows for branch candidates."""
    return [
        PickerEntry(
            key=candidate.name,
            value=candidate,
            ordinal=candidate.name,
            cells=(Text(format_candidate(candidate), style="cyan" if candidate.is_remote else ""),),
        )
        for candidate in candidates
    ]


class BranchPickerScreen(PickerScreen):
    """Picks the branch for a new worktree. Dismisses with the candidate or None."""

    BINDINGS = [
        Binding("escape", "escape", "Back", priority=True),
    ]

    def __init__(self, candidates: Sequence[BranchCandidate]):
        super().__init__(
            "Create Worktree from Branch (Enter to select)",
            BRANCH_COLUMNS,
            make_branch_entries(candidates),
        )

    def action_escape(self) -> None:
        # No normal mode here: escape goes straight back to the worktree picker
        self.close()


class WorktreePickerScreen(PickerScreen):
    """Main picker over the repository's worktrees."""

    BINDINGS = [
        Binding("ctrl+n", "create_worktree", "Create", priority=True),
        Binding("ctrl+p", "set_default_path", "Set Path", priority=True),
        Binding("ctrl+d", "toggle_mark", "Mark", priority=True),
        Binding("ctrl+r", "delete_marked", "Delete Marked", priority=True),
        Binding("f1", "show_legend", "Legend", priority=True),
    ]

    def __init__(self, session: WorktreeVibes, records: Sequence[WorktreeRecord]):
        super().__init__(
            f"{session.config.title} (ctrl+n create | ctrl+p set path | ctrl+d mark | ctrl+r delete)",
            WORKTREE_COLUMNS,
            make_worktree_entries(session, records),
        )
        self.session = session

    def _rerender(self, keep_prompt: bool = True) -> None:
        self.refresh_entries(
            make_worktree_entries(self.session, self.session.worktrees), keep_prompt=keep_prompt
        )
        self.query_one(PickerHeader).set_marked(len(self.session.marked))

    def reopen(self) -> None:
        """Show the picker afresh: re-query worktrees, clear prompt and selection."""
        records = self.session.load_worktrees()
        if not records:
            self.session.notify("No worktrees found", severity="warning")
        self.clear_selection()
        self._rerender(keep_prompt=False)
        self.action_insert_mode()

    def handle_outcome(self, flow: str, outcome: FlowOutcome) -> None:
        """Decide what the picker does after a flow finished."""
        logger.debug(f"{flow} flow finished: {outcome.status.value} {outcome.reason or ''}")
        if flow in ("create", "set_default_path"):
            # Reopen regardless of success, failure or cancellation
            self.reopen()
        elif flow == "mark":
            self.clear_selection()
            self._rerender()
        elif flow == "delete" and outcome.status != OutcomeStatus.CANCELLED:
            self._rerender()

    # Switch

    def action_confirm(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        outcome = self.session.switch_to(entry.value)
        if outcome.ok:
            self.app.exit(outcome.value)

    def close(self) -> None:
        self.app.exit(None)

    # Create

    def action_create_worktree(self) -> None:
        candidates = self.session.available_branches()
        if not candidates:
            return
        self.app.push_screen(BranchPickerScreen(candidates), self._on_branch_chosen)

    def _on_branch_chosen(self, candidate: Optional[BranchCandidate]) -> None:
        if candidate is None:
            self.handle_outcome("create", FlowOutcome.cancelled())
            return

        default_path = self.session.suggest_target_path(candidate)

        def finish(target_path: Optional[str]) -> None:
            self.handle_outcome("create", self.session.create_worktree(candidate, target_path))

        self.app.push_screen(PromptScreen("Worktree path:", default_path), finish)

    # Default path

    def action_set_default_path(self) -> None:
        current = self.session.stored_default_path() or ""

        def finish(path: Optional[str]) -> None:
            self.handle_outcome("set_default_path", self.session.set_default_path(path))

        self.app.push_screen(PromptScreen("Default worktree path:", current), finish)

    # Mark / delete

    def action_toggle_mark(self) -> None:
        selections = self.multi_selection()
        if not selections:
            entry = self.selected_entry()
            selections = [entry] if entry is not None else []
        if not selections:
            return
        outcome = self.session.toggle_marks([entry.value for entry in selections])
        self.handle_outcome("mark", outcome)

    def action_delete_marked(self) -> None:
        paths = self.session.pending_deletions()
        if not paths:
            return

        def finish(confirmed: Optional[bool]) -> None:
            self.handle_outcome("delete", self.session.delete_worktrees(paths, confirmed))

        self.app.push_screen(ConfirmScreen(self.session.deletion_prompt(paths)), finish)

    def action_show_legend(self) -> None:
        self.app.push_screen(LegendScreen(LEGEND_TEXT))


class WorktreeVibesApp(App[Optional[str]]):
    """Interactive worktree picker. Exits with the switched-to path, if any."""

    ENABLE_COMMAND_PALETTE = False
    TITLE = "Worktree Vibes"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    ToastRack {
        offset: 0 -3;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: WorktreeVibes):
        super().__init__()
        self.session = session
        self.session.notify = self._notify

    def _notify(self, message: str, severity: str = "information") -> None:
        self.notify(escape(message), severity=severity)

    def on_mount(self) -> None:
        records = self.session.load_worktrees()
        if not records:
            self._notify("No worktrees found", severity="warning")
        self.push_screen(WorktreePickerScreen(self.session, records))
