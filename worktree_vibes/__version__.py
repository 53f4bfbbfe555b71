"""Version information for worktree-vibes."""

__version__ = "0.1.0"
