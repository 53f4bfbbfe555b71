"""Display service for the non-interactive worktree listing"""
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from worktree_vibes.constants import WORKTREE_COLUMNS
from worktree_vibes.formatters import format_worktree_flags, format_worktree_target
from worktree_vibes.logging_config import get_logger
from worktree_vibes.models.worktree import WorktreeRecord
from worktree_vibes.services.marking_service import MarkedSet

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_worktree_table(
            self,
            worktrees: Sequence[WorktreeRecord],
            marked: Optional[MarkedSet] = None,
            default_path: Optional[str] = None,
        ) -> None:
        """Display a table of worktrees."""
        table = Table()

        for col in WORKTREE_COLUMNS:
            table.add_column(col.label)

        for record in worktrees:
            is_marked = marked is not None and record.path in marked
            if record.is_current:
                row_style = "green"
            elif record.is_primary:
                row_style = "cyan"
            elif record.is_prunable:
                row_style = "yellow"
            else:
                row_style = None

            table.add_row(
                format_worktree_flags(record, is_marked),
                record.path,
                format_worktree_target(record),
                style=row_style,
            )

        self.console.print(table)

        if default_path:
            self.console.print(f"Default worktree path: {default_path}", markup=False)
        logger.debug(f"Displayed {len(worktrees)} worktrees")
