"""Integration tests against real git repositories"""
from pathlib import Path

import pytest

from worktree_vibes.config import Config
from worktree_vibes.core import WorktreeVibes
from worktree_vibes.models.branch import LocalBranch, RemoteBranch
from worktree_vibes.services.default_path_store import DefaultPathStore
from worktree_vibes.services.git.runner import GitCommandRunner


def make_session(repo, temp_dir, notices, monkeypatch, **config_kwargs):
    monkeypatch.chdir(repo.working_dir)
    config = Config(config_path=str(temp_dir / "worktree-vibes.json"), **config_kwargs)
    return WorktreeVibes(
        config,
        runner=GitCommandRunner(repo.working_dir),
        store=DefaultPathStore(config.resolve_config_path()),
        notify=notices,
    )


class TestLocalRepository:
    """Create and delete worktrees in a repository with local branches."""

    @pytest.fixture
    def session(self, git_repo_with_branches, temp_dir, notices, monkeypatch):
        return make_session(git_repo_with_branches, temp_dir, notices, monkeypatch)

    def test_primary_is_current_and_protected(self, session, git_repo_with_branches):
        records = session.load_worktrees()

        assert len(records) == 1
        assert records[0].path == str(Path(git_repo_with_branches.working_dir).resolve())
        assert records[0].is_primary and records[0].is_current
        assert records[0].branch == "main"
        assert not session.toggle_marks(records).ok

    def test_available_branches(self, session):
        assert session.available_branches() == [
            LocalBranch("feature/one"),
            LocalBranch("feature/two"),
        ]

    def test_create_then_delete(self, session, temp_dir, notices):
        target = temp_dir / "wt-one"

        assert session.create_worktree(LocalBranch("feature/one"), str(target)).ok
        records = session.load_worktrees()
        assert [r.branch for r in records] == ["main", "feature/one"]
        assert records[1].path == str(target)
        assert session.available_branches() == [LocalBranch("feature/two")]

        assert session.toggle_marks([records[1]]).ok
        outcome = session.delete_worktrees(session.pending_deletions(), True)

        assert outcome.ok
        assert not target.exists()
        assert [r.branch for r in session.worktrees] == ["main"]
        assert notices.messages("information")[-1] == f"Removed: {target}"

    def test_create_on_existing_path_fails(self, session, temp_dir, notices):
        target = temp_dir / "occupied"
        target.mkdir()
        (target / "file.txt").write_text("taken")

        outcome = session.create_worktree(LocalBranch("feature/one"), str(target))

        assert not outcome.ok
        assert notices.messages("error")[0].startswith("Failed to create worktree:")

    def test_dirty_worktree_removal_needs_force(self, git_repo_with_branches, temp_dir, notices, monkeypatch):
        target = temp_dir / "wt-dirty"
        session = make_session(git_repo_with_branches, temp_dir, notices, monkeypatch)
        session.create_worktree(LocalBranch("feature/two"), str(target))
        (target / "README.md").write_text("changed\n")
        session.load_worktrees()
        session.marked.toggle(str(target))

        assert not session.delete_worktrees([str(target)], True).ok
        assert session.marked.paths() == [str(target)]

        forced = make_session(git_repo_with_branches, temp_dir, notices, monkeypatch, force_remove=True)
        assert forced.delete_worktrees([str(target)], True).ok
        assert not target.exists()


class TestClonedRepository:
    """Remote-only branches in a clone."""

    @pytest.fixture
    def session(self, cloned_repo, temp_dir, notices, monkeypatch):
        return make_session(cloned_repo, temp_dir, notices, monkeypatch)

    def test_remote_candidates(self, session):
        assert session.available_branches() == [
            RemoteBranch("origin/feature/one", "feature/one"),
            RemoteBranch("origin/feature/two", "feature/two"),
        ]

    def test_create_from_remote_branch(self, session, cloned_repo, temp_dir):
        candidate = RemoteBranch("origin/feature/one", "feature/one")
        session.set_default_path(str(temp_dir / "trees"))
        target = session.suggest_target_path(candidate)

        assert target == str(temp_dir / "trees" / "feature" / "one")
        assert session.create_worktree(candidate, target).ok
        assert "feature/one" in [head.name for head in cloned_repo.heads]
        assert session.load_worktrees()[1].branch == "feature/one"
