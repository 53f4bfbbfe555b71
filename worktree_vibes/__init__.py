"""
worktree-vibes - An interactive picker for git worktrees
"""

from .__version__ import __version__
from .core import WorktreeVibes
from .cli import main

__all__ = ["WorktreeVibes", "main", "__version__"]
