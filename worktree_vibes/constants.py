"""Shared constants for worktree-vibes."""

from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Unified column definitions for both CLI and TUI
WORKTREE_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("flags", "", 6),
    ColumnDefinition("path", "Path", 0),
    ColumnDefinition("branch", "Branch", 35),
]

BRANCH_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 0),
]


# Symbol constants
SYMBOL_PRIMARY = "🏠"
SYMBOL_CURRENT = "💻"
SYMBOL_MARKED = "🗑"
SYMBOL_LOCKED = "🔒"
SYMBOL_REMOTE_BRANCH = "🌐"
SYMBOL_LOCAL_BRANCH = "📍"
SYMBOL_SELECTED = "+"
SYMBOL_BARE = "[bare]"

SHORT_SHA_LENGTH = 7


# Default location of the per-repository default path store
CONFIG_DIR = Path.home() / ".worktree-vibes"
CONFIG_FILE_NAME = "worktree-vibes.json"
CONFIG_ENV_VAR = "WORKTREE_VIBES_CONFIG"
LOG_FILE_NAME = "worktree-vibes.log"


# Porcelain record prefixes from `git worktree list --porcelain`
PORCELAIN_WORKTREE = "worktree "
PORCELAIN_HEAD = "HEAD "
PORCELAIN_BRANCH = "branch "
PORCELAIN_BARE = "bare"
PORCELAIN_DETACHED = "detached"
PORCELAIN_LOCKED = "locked"
PORCELAIN_PRUNABLE = "prunable"
LOCAL_BRANCH_REF_PREFIX = "refs/heads/"


# Legend text for the picker help screen
LEGEND_TEXT = """
Legend:
🏠 = Primary worktree     💻 = Current worktree
🗑 = Marked for deletion  🔒 = Locked worktree
🌐 = Remote branch        📍 = Local branch
+  = Selected (tab)

Keys:
enter  = Switch to worktree     ctrl+n = Create worktree
ctrl+p = Set default path       ctrl+d = Mark/unmark
ctrl+r = Delete marked          tab    = Select
escape = Normal mode / close    i      = Insert mode
"""
