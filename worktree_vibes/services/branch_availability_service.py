"""Computes which branches can be offered for a new worktree."""

from typing import Iterable, List, Optional, Sequence

from worktree_vibes.models.branch import BranchCandidate, LocalBranch, RemoteBranch
from worktree_vibes.models.worktree import WorktreeRecord


class BranchAvailabilityService:
    """Service for resolving branch candidates for the create-worktree flow."""

    @staticmethod
    def strip_remote_prefix(remote_branch: str, remotes: Optional[Sequence[str]] = None) -> Optional[str]:
        """
        Derive the local branch name of a remote-tracking branch.

        With known remote names, the longest matching `<remote>/` prefix is
        stripped, so remotes whose names contain slashes resolve correctly.
        Otherwise the first `/`-delimited segment is stripped.

        Args:
            remote_branch: Remote branch short name, e.g. origin/feature/x
            remotes: Configured remote names, if known

        Returns:
            Local name (e.g. feature/x), or None if nothing remains
        """
        if remotes:
            for remote in sorted(remotes, key=len, reverse=True):
                prefix = remote + "/"
                if remote_branch.startswith(prefix):
                    return remote_branch[len(prefix):] or None

        _, sep, local_name = remote_branch.partition("/")
        if not sep:
            return None
        return local_name or None

    @staticmethod
    def compute_available(
        worktrees: Iterable[WorktreeRecord],
        local_branches: Sequence[str],
        remote_branches: Sequence[str],
        remotes: Optional[Sequence[str]] = None,
    ) -> List[BranchCandidate]:
        """
        Compute branches eligible for new-worktree creation.

        Args:
            worktrees: Existing worktrees
            local_branches: Local branch names in git's order
            remote_branches: Remote branch names in git's order (HEAD pointers excluded)
            remotes: Configured remote names, used to strip remote prefixes

        Returns:
            Local candidates first, then remote candidates, each in git's order
        """
        used_branches = {wt.branch for wt in worktrees if wt.branch}
        local_set = set(local_branches)

        available: List[BranchCandidate] = []
        seen = set()

        for branch in local_branches:
            if branch in used_branches or branch in seen:
                continue
            seen.add(branch)
            available.append(LocalBranch(name=branch))

        for branch in remote_branches:
            if branch in seen:
                continue
            local_name = BranchAvailabilityService.strip_remote_prefix(branch, remotes)
            if not local_name or local_name in used_branches or local_name in local_set:
                continue
            seen.add(branch)
            available.append(RemoteBranch(name=branch, local_name=local_name))

        return available
