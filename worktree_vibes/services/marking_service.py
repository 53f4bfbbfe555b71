"""Deletion marks for worktrees, kept across picker refreshes."""

from typing import Dict, Iterable, List, Optional

from worktree_vibes.exceptions import WorktreeProtectedError
from worktree_vibes.logging_config import get_logger
from worktree_vibes.models.worktree import WorktreeRecord

logger = get_logger(__name__)


class MarkedSet:
    """Set of worktree paths marked for deletion.

    Each path is either unmarked or marked. The primary and current worktrees
    are protected: toggling them raises without changing any state.
    """

    def __init__(self) -> None:
        self._marked: Dict[str, None] = {}  # dict keeps insertion order
        self._protected: Dict[str, str] = {}  # path -> "primary" / "current"

    def sync(self, records: Iterable[WorktreeRecord]) -> None:
        """Update protection from a fresh worktree listing.

        Marks for paths that became the primary or current worktree are
        dropped, as are marks for paths missing from a non-empty listing. An
        empty listing (git failed) leaves existing marks alone.

        Args:
            records: Worktrees from the latest listing
        """
        records = list(records)
        self._protected = {}
        for record in records:
            if record.is_protected:
                self._protected[record.path] = record.protected_reason

        listed = {record.path for record in records}
        for path in list(self._marked):
            if (listed and path not in listed) or path in self._protected:
                logger.debug(f"Dropping stale mark for {path}")
                del self._marked[path]

    def toggle(self, path: str, protected_reason: Optional[str] = None) -> bool:
        """Flip the mark on a worktree.

        Args:
            path: Worktree path
            protected_reason: "primary" or "current" when the caller already
                knows the path is protected; paths protected by the last
                `sync` are rejected either way

        Returns:
            True if the path is now marked, False if now unmarked

        Raises:
            WorktreeProtectedError: If path is the primary or current worktree
        """
        reason = protected_reason or self._protected.get(path)
        if reason:
            raise WorktreeProtectedError(path, reason)

        if path in self._marked:
            del self._marked[path]
            logger.debug(f"Unmarked {path}")
            return False

        self._marked[path] = None
        logger.debug(f"Marked {path}")
        return True

    def clear(self, path: str) -> None:
        """Force a path to unmarked."""
        self._marked.pop(path, None)

    def is_marked(self, path: str) -> bool:
        return path in self._marked

    def paths(self) -> List[str]:
        """Marked paths in the order they were marked."""
        return list(self._marked)

    def __contains__(self, path: object) -> bool:
        return path in self._marked

    def __len__(self) -> int:
        return len(self._marked)
