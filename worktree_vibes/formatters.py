"""Shared formatting utilities for worktree-vibes."""

from typing import List, Optional, Sequence

from worktree_vibes.constants import (
    SHORT_SHA_LENGTH,
    SYMBOL_BARE,
    SYMBOL_CURRENT,
    SYMBOL_LOCAL_BRANCH,
    SYMBOL_LOCKED,
    SYMBOL_MARKED,
    SYMBOL_PRIMARY,
    SYMBOL_REMOTE_BRANCH,
)
from worktree_vibes.models.branch import BranchCandidate
from worktree_vibes.models.worktree import WorktreeRecord


def format_worktree_flags(record: WorktreeRecord, is_marked: bool = False) -> str:
    """
    Format the icon column of a worktree row.

    Args:
        record: Worktree to describe
        is_marked: Whether the worktree is marked for deletion

    Returns:
        Concatenated icons (may be empty)
    """
    flags = ""
    if record.is_primary:
        flags += SYMBOL_PRIMARY
    if record.is_current:
        flags += SYMBOL_CURRENT
    if is_marked:
        flags += SYMBOL_MARKED
    if record.is_locked:
        flags += SYMBOL_LOCKED
    return flags


def format_worktree_target(record: WorktreeRecord) -> str:
    """Format what a worktree has checked out: branch, short commit, or [bare]."""
    if record.branch:
        return record.branch
    if record.head:
        return record.head[:SHORT_SHA_LENGTH]
    return SYMBOL_BARE


def worktree_ordinal(record: WorktreeRecord) -> str:
    """Text the picker's fuzzy filter matches a worktree against."""
    return f"{record.path} {record.branch or ''}"


def format_candidate(candidate: BranchCandidate) -> str:
    """Format a branch candidate with its local/remote icon."""
    icon = SYMBOL_REMOTE_BRANCH if candidate.is_remote else SYMBOL_LOCAL_BRANCH
    return f"{icon} {candidate.name}"


def format_default_target_path(candidate: BranchCandidate, stored_default: Optional[str]) -> str:
    """
    Build the pre-filled target path for a new worktree.

    Args:
        candidate: Branch the worktree will check out
        stored_default: Stored default directory (with trailing separator), if any

    Returns:
        `<stored_default><branch>` or `../<branch>`
    """
    if stored_default:
        return f"{stored_default}{candidate.checkout_name}"
    return f"../{candidate.checkout_name}"


def format_deletion_confirmation(paths: Sequence[str]) -> str:
    """Format the yes/no question asked before deleting marked worktrees."""
    items: List[str] = [f"  • {path}" for path in paths]
    return f"Delete {len(paths)} worktree(s)?\n\n" + "\n".join(items)
