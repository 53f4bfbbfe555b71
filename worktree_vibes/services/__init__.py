"""Services for worktree-vibes."""
