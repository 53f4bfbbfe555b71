"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorktreeRecord:
    """One entry of `git worktree list --porcelain`."""

    path: str
    branch: Optional[str] = None  # None for bare and detached worktrees
    head: Optional[str] = None
    is_bare: bool = False
    is_primary: bool = False  # First worktree listed by git
    is_current: bool = False  # path == cwd at query time
    is_detached: bool = False
    is_locked: bool = False
    is_prunable: bool = False  # Directory missing, git would prune it

    @property
    def protected_reason(self) -> Optional[str]:
        """Why this worktree can never be marked for deletion, or None."""
        if self.is_primary:
            return "primary"
        if self.is_current:
            return "current"
        return None

    @property
    def is_protected(self) -> bool:
        return self.protected_reason is not None

    def __str__(self) -> str:
        """String representation of worktree."""
        target = self.branch or self.head or "[bare]"
        markers = []
        if self.is_primary:
            markers.append("primary")
        if self.is_current:
            markers.append("current")
        suffix = f" ({', '.join(markers)})" if markers else ""
        return f"{target} @ {self.path}{suffix}"
