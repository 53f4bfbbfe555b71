"""Core worktree session logic shared by the TUI and the CLI."""

import os
from typing import Callable, List, Optional, Sequence

from worktree_vibes.config import Config
from worktree_vibes.exceptions import (
    ConfigStoreError,
    NotARepositoryError,
    WorktreeProtectedError,
)
from worktree_vibes.formatters import format_default_target_path, format_deletion_confirmation
from worktree_vibes.logging_config import get_logger
from worktree_vibes.models.branch import BranchCandidate
from worktree_vibes.models.outcome import FlowOutcome
from worktree_vibes.models.worktree import WorktreeRecord
from worktree_vibes.services.branch_availability_service import BranchAvailabilityService
from worktree_vibes.services.default_path_store import DefaultPathStore
from worktree_vibes.services.git import GitCommandRunner, RepositoryInspector, WorktreeOperations
from worktree_vibes.services.git.operations import RemovalResult
from worktree_vibes.services.marking_service import MarkedSet

logger = get_logger(__name__)

# notify(message, severity) where severity is "information", "warning" or "error"
Notifier = Callable[..., None]


def _log_notifier(message: str, severity: str = "information") -> None:
    level = {"warning": "warning", "error": "error"}.get(severity, "info")
    getattr(logger, level)(message)


class WorktreeVibes:
    """One picker session over the repository in the current directory.

    Every flow reports back to the user through ``notify`` and returns a
    FlowOutcome; tool and file errors never escape a flow.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        runner: Optional[GitCommandRunner] = None,
        store: Optional[DefaultPathStore] = None,
        marked: Optional[MarkedSet] = None,
        notify: Optional[Notifier] = None,
    ):
        self.config = config or Config()
        self.runner = runner or GitCommandRunner()
        self.store = store or DefaultPathStore(self.config.resolve_config_path())
        self.marked = marked or MarkedSet()
        self.notify: Notifier = notify or _log_notifier

        self.inspector = RepositoryInspector(self.runner)
        self.operations = WorktreeOperations(
            self.runner, self.marked, force_remove=self.config.force_remove
        )
        self.worktrees: List[WorktreeRecord] = []

    # Repository state

    def repo_root(self) -> Optional[str]:
        """Get the repository root, or None (with an error notice) outside a repository."""
        try:
            return self.inspector.get_repo_root()
        except NotARepositoryError as e:
            logger.debug(f"Repository root lookup failed: {e}")
            self.notify("Not in a git repository", severity="error")
            return None

    def load_worktrees(self) -> List[WorktreeRecord]:
        """Re-query the worktree list and reconcile marks with it."""
        self.worktrees = self.inspector.list_worktrees()
        self.marked.sync(self.worktrees)
        return self.worktrees

    def is_marked(self, record: WorktreeRecord) -> bool:
        return record.path in self.marked

    # Switch

    def switch_to(self, record: WorktreeRecord) -> FlowOutcome:
        """Change the process's working directory to a worktree."""
        try:
            os.chdir(record.path)
        except OSError as e:
            self.notify(f"Failed to switch to {record.path}: {e}", severity="error")
            return FlowOutcome.failed(str(e))

        logger.info(f"Switched to {record.path}")
        self.notify(f"Switched to: {record.path}", severity="information")
        return FlowOutcome.completed(value=record.path)

    # Create

    def available_branches(self) -> List[BranchCandidate]:
        """Compute branches that can get a new worktree.

        Warns the user when there are none; the create flow should stop then.
        """
        worktrees = self.load_worktrees()
        local_branches = self.inspector.list_local_branches()
        if self.config.include_remote:
            remote_branches = self.inspector.list_remote_branches()
            remotes = self.inspector.list_remotes()
        else:
            remote_branches, remotes = [], []

        candidates = BranchAvailabilityService.compute_available(
            worktrees, local_branches, remote_branches, remotes
        )
        logger.debug(f"{len(candidates)} branches available for new worktrees")
        if not candidates:
            self.notify("No available branches without worktrees", severity="warning")
        return candidates

    def stored_default_path(self) -> Optional[str]:
        """Get the stored default directory for this repository, without notices."""
        try:
            root = self.inspector.get_repo_root()
        except NotARepositoryError:
            return None
        return self.store.get_default(root)

    def suggest_target_path(self, candidate: BranchCandidate) -> str:
        """Pre-filled path for a new worktree of ``candidate``."""
        return format_default_target_path(candidate, self.stored_default_path())

    def create_worktree(self, candidate: BranchCandidate, target_path: Optional[str]) -> FlowOutcome:
        """Create a worktree at ``target_path``.

        An empty or missing path means the user cancelled the prompt; git is
        not invoked then.
        """
        if not target_path or not target_path.strip():
            logger.debug("Worktree creation cancelled")
            return FlowOutcome.cancelled()

        target_path = target_path.strip()
        if candidate.is_remote:
            self.notify(
                f"Creating worktree from remote branch: {candidate.name}", severity="information"
            )

        result = self.operations.create_worktree(candidate, target_path)
        if not result.ok:
            self.notify(f"Failed to create worktree: {result.output}", severity="error")
            return FlowOutcome.failed(result.output)

        self.notify(f"Created worktree: {target_path}", severity="information")
        return FlowOutcome.completed(value=target_path)

    # Default path

    def set_default_path(self, raw_path: Optional[str]) -> FlowOutcome:
        """Store the default directory for new worktrees of this repository."""
        if not raw_path or not raw_path.strip():
            return FlowOutcome.cancelled()

        root = self.repo_root()
        if root is None:
            return FlowOutcome.failed("Not in a git repository")

        try:
            path = self.store.set_default(root, raw_path)
        except ConfigStoreError as e:
            logger.error(str(e))
            self.notify(str(e), severity="error")
            path = self.store.get_default(root)
            self.notify(
                f"Default worktree path set to: {path} (this session only)", severity="warning"
            )
            return FlowOutcome.completed(value=path)

        self.notify(f"Default worktree path set to: {path}", severity="information")
        return FlowOutcome.completed(value=path)

    # Mark

    def toggle_marks(self, records: Sequence[WorktreeRecord]) -> FlowOutcome:
        """Toggle the deletion mark on each record.

        Protected worktrees are skipped with a warning.
        """
        rejected = 0
        for record in records:
            try:
                self.marked.toggle(record.path, record.protected_reason)
            except WorktreeProtectedError as e:
                rejected += 1
                self.notify(str(e), severity="warning")

        if records and rejected == len(records):
            return FlowOutcome.failed("Protected worktree")
        return FlowOutcome.completed()

    # Delete

    def pending_deletions(self) -> List[str]:
        """Marked paths, with a warning if there are none."""
        paths = self.marked.paths()
        if not paths:
            self.notify("No worktrees marked for deletion", severity="warning")
        return paths

    @staticmethod
    def deletion_prompt(paths: Sequence[str]) -> str:
        return format_deletion_confirmation(paths)

    def delete_worktrees(self, paths: Sequence[str], confirmed: Optional[bool]) -> FlowOutcome:
        """Remove the given worktrees after the user confirmed.

        Each path gets its own notice. Failed paths stay marked. The worktree
        list is re-queried afterwards.
        """
        if not confirmed:
            logger.debug("Deletion cancelled")
            return FlowOutcome.cancelled()
        if not paths:
            return FlowOutcome.cancelled()

        results = self.operations.delete_worktrees(paths)
        self._report_removals(results)
        self.load_worktrees()

        failed = [r for r in results if not r.ok]
        if failed:
            return FlowOutcome.failed(f"{len(failed)} of {len(results)} removals failed")
        return FlowOutcome.completed()

    def _report_removals(self, results: Sequence[RemovalResult]) -> None:
        for removal in results:
            if removal.ok:
                self.notify(f"Removed: {removal.path}", severity="information")
            else:
                self.notify(
                    f"Failed to remove {removal.path}: {removal.result.output}", severity="error"
                )
