"""Textual screens and widgets for worktree-vibes."""
