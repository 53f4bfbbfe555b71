"""Branch candidate models for the create-worktree flow."""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LocalBranch:
    """A local branch not checked out in any worktree."""
    name: str

    @property
    def is_remote(self) -> bool:
        return False

    @property
    def checkout_name(self) -> str:
        """Name of the local branch the new worktree will have checked out."""
        return self.name


@dataclass(frozen=True)
class RemoteBranch:
    """A remote branch with no local counterpart; creating it adds a tracking branch."""
    name: str  # e.g. origin/feature
    local_name: str  # e.g. feature

    @property
    def is_remote(self) -> bool:
        return True

    @property
    def checkout_name(self) -> str:
        return self.local_name


BranchCandidate = Union[LocalBranch, RemoteBranch]
