"""Pytest fixtures for worktree-vibes tests"""
import tempfile
from pathlib import Path

import pytest
import git

from worktree_vibes.config import Config
from worktree_vibes.core import WorktreeVibes
from worktree_vibes.services.default_path_store import DefaultPathStore
from worktree_vibes.services.git.runner import CommandResult


PORCELAIN_THREE_WORKTREES = """worktree /repo
HEAD 1111111111111111111111111111111111111111
branch refs/heads/main

worktree /repo-wt1
HEAD 2222222222222222222222222222222222222222
branch refs/heads/feat

worktree /repo-wt2
HEAD abc123
detached
"""


class FakeRunner:
    """Command runner returning canned results keyed by git arguments."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        response = self.responses.get(args, CommandResult(status=0))
        if callable(response):
            return response(*args)
        return response

    def called(self, *args):
        return args in self.calls


class Notices:
    """Collects user notices as (severity, message) pairs."""

    def __init__(self):
        self.items = []

    def __call__(self, message, severity="information"):
        self.items.append((severity, message))

    def messages(self, severity=None):
        return [m for s, m in self.items if severity is None or s == severity]


def ok(stdout=""):
    return CommandResult(status=0, stdout=stdout)


def fail(stderr="fatal: error", status=1):
    return CommandResult(status=status, stderr=stderr)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def config(temp_dir):
    """Config whose default path store lives in the temp dir."""
    return Config(config_path=str(temp_dir / "worktree-vibes.json"))


@pytest.fixture
def notices():
    return Notices()


@pytest.fixture
def fake_runner():
    """Runner for a repo at /repo with three worktrees and a few branches."""
    return FakeRunner({
        ("rev-parse", "--show-toplevel"): ok("/repo"),
        ("worktree", "list", "--porcelain"): ok(PORCELAIN_THREE_WORKTREES),
        ("branch", "--format=%(refname:short)"): ok("main\nfeat\nold"),
        ("branch", "-r", "--format=%(refname:short)"): ok("origin\norigin/main\norigin/feat\norigin/new"),
        ("remote",): ok("origin"),
    })


@pytest.fixture
def session(config, fake_runner, notices):
    """A WorktreeVibes session wired to the fake runner."""
    return WorktreeVibes(
        config,
        runner=fake_runner,
        store=DefaultPathStore(config.resolve_config_path()),
        notify=notices,
    )


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with extra local branches."""
    git_repo.git.branch('feature/one')
    git_repo.git.branch('feature/two')
    yield git_repo


@pytest.fixture
def cloned_repo(git_repo_with_branches, temp_dir):
    """Clone of git_repo_with_branches: local main, remote-only feature branches."""
    clone_path = temp_dir / "clone"
    clone = git.Repo.clone_from(git_repo_with_branches.working_dir, clone_path)
    yield clone
    clone.close()
