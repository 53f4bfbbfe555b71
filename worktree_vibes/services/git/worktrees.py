"""Repository inspection: repo root, worktree listing and branch listings."""

import os
from typing import Any, Dict, List, Optional

from worktree_vibes.constants import (
    LOCAL_BRANCH_REF_PREFIX,
    PORCELAIN_BARE,
    PORCELAIN_BRANCH,
    PORCELAIN_DETACHED,
    PORCELAIN_HEAD,
    PORCELAIN_LOCKED,
    PORCELAIN_PRUNABLE,
    PORCELAIN_WORKTREE,
)
from worktree_vibes.exceptions import NotARepositoryError
from worktree_vibes.logging_config import get_logger
from worktree_vibes.models.worktree import WorktreeRecord
from worktree_vibes.services.git.runner import GitCommandRunner

logger = get_logger(__name__)


def _is_flag_line(line: str, flag: str) -> bool:
    """Match `flag` alone or followed by a reason (`locked <reason>`)."""
    return line == flag or line.startswith(flag + " ")


def parse_worktree_porcelain(output: str, cwd: Optional[str] = None) -> List[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or `detached`, or `bare`)
        (blank line between worktrees)

    A record starts at each `worktree` line; attribute lines attach to the
    record being built. Lines before the first `worktree` line are ignored, so
    empty or unrecognised output yields an empty list.

    Args:
        output: Raw porcelain output
        cwd: Directory compared against each path to flag the current worktree

    Returns:
        Records in git's order; the first is flagged primary
    """
    entries: List[Dict[str, Any]] = []
    current: Optional[Dict[str, Any]] = None

    for raw_line in output.splitlines():
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue

        if line.startswith(PORCELAIN_WORKTREE):
            # Paths are unique keys; keep surrounding whitespace
            path = line[len(PORCELAIN_WORKTREE):]
            current = {"path": path} if path.strip() else None
            if current is not None:
                entries.append(current)
            continue

        if current is None:
            continue

        if line.startswith(PORCELAIN_HEAD):
            current["head"] = line[len(PORCELAIN_HEAD):].strip()
        elif line.startswith(PORCELAIN_BRANCH):
            ref = line[len(PORCELAIN_BRANCH):].strip()
            if ref.startswith(LOCAL_BRANCH_REF_PREFIX):
                current["branch"] = ref[len(LOCAL_BRANCH_REF_PREFIX):]
        elif _is_flag_line(line, PORCELAIN_BARE):
            current["is_bare"] = True
        elif _is_flag_line(line, PORCELAIN_DETACHED):
            current["is_detached"] = True
        elif _is_flag_line(line, PORCELAIN_LOCKED):
            current["is_locked"] = True
        elif _is_flag_line(line, PORCELAIN_PRUNABLE):
            current["is_prunable"] = True

    records = []
    for index, entry in enumerate(entries):
        is_bare = entry.get("is_bare", False)
        is_detached = entry.get("is_detached", False)
        records.append(
            WorktreeRecord(
                path=entry["path"],
                # A bare or detached worktree has no branch
                branch=None if (is_bare or is_detached) else entry.get("branch"),
                head=entry.get("head"),
                is_bare=is_bare,
                is_primary=index == 0,
                is_current=cwd is not None and entry["path"] == cwd,
                is_detached=is_detached,
                is_locked=entry.get("is_locked", False),
                is_prunable=entry.get("is_prunable", False),
            )
        )
    return records


class RepositoryInspector:
    """Read-only queries against the repository through the command runner."""

    def __init__(self, runner: GitCommandRunner):
        self.runner = runner

    def get_repo_root(self) -> str:
        """Get the absolute path of the repository root.

        Raises:
            NotARepositoryError: If the working directory is not inside a repository
        """
        result = self.runner.run("rev-parse", "--show-toplevel")
        lines = result.lines()
        if not result.ok or not lines:
            raise NotARepositoryError(message=result.output or None)
        return lines[0]

    def list_worktrees(self) -> List[WorktreeRecord]:
        """Get all worktrees, flagging the primary and the current one.

        Returns:
            List of WorktreeRecord; empty if git fails or prints nothing usable
        """
        result = self.runner.run("worktree", "list", "--porcelain")
        if not result.ok:
            logger.debug(f"Could not list worktrees: {result.output}")
            return []

        records = parse_worktree_porcelain(result.stdout, os.getcwd())
        logger.debug(f"Found {len(records)} worktrees")
        for record in records:
            logger.debug(f"  {record}")
        return records

    def list_local_branches(self) -> List[str]:
        """Get local branch short names in git's order."""
        result = self.runner.run("branch", "--format=%(refname:short)")
        if not result.ok:
            logger.debug(f"Could not list local branches: {result.output}")
            return []
        return result.lines()

    def list_remote_branches(self) -> List[str]:
        """Get remote-tracking branch short names, without symbolic HEAD pointers."""
        result = self.runner.run("branch", "-r", "--format=%(refname:short)")
        if not result.ok:
            logger.debug(f"Could not list remote branches: {result.output}")
            return []

        branches = []
        for name in result.lines():
            # refs/remotes/origin/HEAD shortens to "origin" (or "origin/HEAD" on older git)
            if name == "HEAD" or name.endswith("/HEAD") or "/" not in name:
                continue
            # Older git prints "origin/HEAD -> origin/main"
            if " -> " in name:
                continue
            branches.append(name)
        return branches

    def list_remotes(self) -> List[str]:
        """Get configured remote names."""
        result = self.runner.run("remote")
        if not result.ok:
            logger.debug(f"Could not list remotes: {result.output}")
            return []
        return result.lines()
