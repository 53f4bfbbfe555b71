"""Worktree create/remove operations."""

from dataclasses import dataclass
from typing import Iterable, List

from worktree_vibes.logging_config import get_logger
from worktree_vibes.models.branch import BranchCandidate
from worktree_vibes.services.git.runner import CommandResult, GitCommandRunner
from worktree_vibes.services.marking_service import MarkedSet

logger = get_logger(__name__)


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of removing one worktree."""

    path: str
    result: CommandResult

    @property
    def ok(self) -> bool:
        return self.result.ok


class WorktreeOperations:
    """Service for creating and removing worktrees."""

    def __init__(self, runner: GitCommandRunner, marked: MarkedSet, force_remove: bool = False):
        """Initialize the operations service.

        Args:
            runner: Command runner used for git invocations
            marked: Deletion marks, cleared as removals succeed
            force_remove: Pass --force to `git worktree remove`
        """
        self.runner = runner
        self.marked = marked
        self.force_remove = force_remove

    def create_worktree(self, candidate: BranchCandidate, target_path: str) -> CommandResult:
        """Create a worktree for a branch candidate.

        A local candidate is checked out as-is; a remote candidate gets a new
        local branch named after it that tracks the remote branch.

        Args:
            candidate: Branch to check out
            target_path: Directory of the new worktree

        Returns:
            CommandResult of `git worktree add`
        """
        if candidate.is_remote:
            args = ["worktree", "add", "-b", candidate.checkout_name, target_path, candidate.name]
        else:
            args = ["worktree", "add", target_path, candidate.name]

        result = self.runner.run(*args)
        if result.ok:
            logger.info(f"Created worktree at {target_path} for {candidate.name}")
        else:
            logger.error(f"Failed to create worktree at {target_path}: {result.output}")
        return result

    def remove_worktree(self, path: str) -> CommandResult:
        """Remove a single worktree."""
        args = ["worktree", "remove", path]
        if self.force_remove:
            args.append("--force")
        return self.runner.run(*args)

    def delete_worktrees(self, paths: Iterable[str]) -> List[RemovalResult]:
        """Remove worktrees one by one.

        Each removal is independent: a failure does not stop the batch and
        successes are not rolled back. A path's mark is cleared as soon as its
        removal succeeds, so failed paths stay marked.

        Args:
            paths: Worktree paths; must not include the primary or current worktree

        Returns:
            One RemovalResult per path, in order
        """
        results = []
        for path in list(paths):
            result = self.remove_worktree(path)
            if result.ok:
                logger.info(f"Removed worktree at {path}")
                self.marked.clear(path)
            else:
                logger.error(f"Failed to remove worktree at {path}: {result.output}")
            results.append(RemovalResult(path=path, result=result))
        return results
