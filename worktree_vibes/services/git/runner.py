"""Command runner that executes git and reports status instead of raising."""

import os
from dataclasses import dataclass
from typing import List, Optional

import git

from worktree_vibes.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one git invocation."""

    status: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.status == 0

    @property
    def output(self) -> str:
        """Combined output, as a user would see it in a terminal."""
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)

    def lines(self) -> List[str]:
        """Non-blank stdout lines, kept verbatim apart from line endings."""
        return [line.rstrip("\r") for line in self.stdout.splitlines() if line.strip()]


class GitCommandRunner:
    """Runs `git <args>` in a working directory.

    When no working directory is given, each call runs in the process's current
    directory at call time, so switching worktrees changes what later calls see.
    """

    def __init__(self, working_dir: Optional[str] = None):
        self.working_dir = working_dir

    def run(self, *args: str) -> CommandResult:
        """Run a git command and capture its exit status and output.

        Args:
            *args: Arguments after `git`, e.g. ("worktree", "list", "--porcelain")

        Returns:
            CommandResult; a non-zero status is returned, never raised
        """
        cwd = self.working_dir or os.getcwd()
        command = ["git", *args]
        logger.debug(f"Running {' '.join(command)} in {cwd}")
        try:
            status, stdout, stderr = git.Git(cwd).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except git.exc.GitCommandNotFound as e:
            logger.error(f"git executable not found: {e}")
            return CommandResult(status=127, stderr=str(e))

        if status != 0:
            logger.debug(f"{' '.join(command)} exited with {status}: {stderr.strip()}")
        return CommandResult(status=status, stdout=stdout, stderr=stderr)
