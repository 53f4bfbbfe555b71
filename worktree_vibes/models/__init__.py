"""Data models for worktree-vibes."""

from .worktree import WorktreeRecord
from .branch import BranchCandidate, LocalBranch, RemoteBranch
from .outcome import FlowOutcome, OutcomeStatus

__all__ = [
    "WorktreeRecord",
    "BranchCandidate",
    "LocalBranch",
    "RemoteBranch",
    "FlowOutcome",
    "OutcomeStatus",
]
