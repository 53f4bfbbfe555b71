"""Git-related services for worktree-vibes."""

from .runner import CommandResult, GitCommandRunner
from .worktrees import RepositoryInspector, parse_worktree_porcelain
from .operations import RemovalResult, WorktreeOperations

__all__ = [
    "CommandResult",
    "GitCommandRunner",
    "RepositoryInspector",
    "parse_worktree_porcelain",
    "RemovalResult",
    "WorktreeOperations",
]
