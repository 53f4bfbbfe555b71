"""Custom exceptions for worktree-vibes"""

from typing import Optional


class WorktreeVibesError(Exception):
    """Base exception for all worktree-vibes errors."""
    pass


class GitOperationError(WorktreeVibesError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, target: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.target = target
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(GitOperationError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: Optional[str] = None, message: Optional[str] = None):
        super().__init__("find_repo_root", path, message or "Not in a git repository")


class WorktreeProtectedError(WorktreeVibesError):
    """Exception raised when attempting to mark the primary or current worktree."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot mark {reason} worktree for deletion")


class ConfigStoreError(WorktreeVibesError):
    """Exception raised when the default path store cannot be written."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Failed to save worktree-vibes config at {path}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
