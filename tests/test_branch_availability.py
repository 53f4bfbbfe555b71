"""Tests for BranchAvailabilityService"""
from worktree_vibes.models.branch import LocalBranch, RemoteBranch
from worktree_vibes.models.worktree import WorktreeRecord
from worktree_vibes.services.branch_availability_service import BranchAvailabilityService


def _worktrees(*branches):
    return [
        WorktreeRecord(path=f"/wt/{i}", branch=branch, is_primary=i == 0)
        for i, branch in enumerate(branches)
    ]


class TestComputeAvailable:
    """Test candidate computation."""

    def test_scenario_local_and_remote(self):
        """Bound branches and redundant remotes are excluded."""
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main", "feat"),
            ["main", "feat", "old"],
            ["origin/main", "origin/feat", "origin/new"],
        )

        assert candidates == [
            LocalBranch(name="old"),
            RemoteBranch(name="origin/new", local_name="new"),
        ]

    def test_never_offers_bound_branch(self):
        worktrees = _worktrees("main", "x")
        candidates = BranchAvailabilityService.compute_available(
            worktrees, ["main", "x", "y"], ["origin/x", "origin/y", "origin/z"]
        )

        bound = {wt.branch for wt in worktrees}
        assert not any(c.checkout_name in bound for c in candidates)
        assert not any(c.name in bound for c in candidates)

    def test_remote_suppressed_by_local_branch(self):
        """origin/x is not offered when a local x exists, even if x is free."""
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main"), ["main", "x"], ["origin/x"]
        )
        assert candidates == [LocalBranch(name="x")]

    def test_ordering_is_tool_order(self):
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main"), ["main", "zeta", "alpha"], ["origin/omega", "origin/beta"]
        )
        assert [c.name for c in candidates] == ["zeta", "alpha", "origin/omega", "origin/beta"]
        assert [c.is_remote for c in candidates] == [False, False, True, True]

    def test_nothing_available(self):
        assert BranchAvailabilityService.compute_available(_worktrees("main"), ["main"], ["origin/main"]) == []

    def test_detached_worktrees_bind_nothing(self):
        worktrees = [WorktreeRecord(path="/a", branch="main", is_primary=True), WorktreeRecord(path="/b", head="abc")]
        candidates = BranchAvailabilityService.compute_available(worktrees, ["main", "dev"], [])
        assert candidates == [LocalBranch(name="dev")]

    def test_nested_branch_name(self):
        """Only the remote prefix is stripped from slashed branch names."""
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main"), ["main"], ["origin/feature/login"]
        )
        assert candidates == [RemoteBranch(name="origin/feature/login", local_name="feature/login")]

    def test_remote_name_with_slash(self):
        """Known remote names containing slashes are stripped whole."""
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main"), ["main"], ["team/upstream/fix"], remotes=["origin", "team/upstream"]
        )
        assert candidates == [RemoteBranch(name="team/upstream/fix", local_name="fix")]

    def test_duplicate_remote_entries(self):
        candidates = BranchAvailabilityService.compute_available(
            _worktrees("main"), ["main"], ["origin/a", "origin/a"]
        )
        assert candidates == [RemoteBranch(name="origin/a", local_name="a")]


class TestStripRemotePrefix:
    """Test remote prefix stripping."""

    def test_first_segment(self):
        assert BranchAvailabilityService.strip_remote_prefix("origin/x") == "x"

    def test_no_slash(self):
        assert BranchAvailabilityService.strip_remote_prefix("origin") is None

    def test_empty_remainder(self):
        assert BranchAvailabilityService.strip_remote_prefix("origin/") is None

    def test_longest_known_remote_wins(self):
        result = BranchAvailabilityService.strip_remote_prefix("a/b/c", remotes=["a", "a/b"])
        assert result == "c"

    def test_unknown_remote_falls_back_to_first_segment(self):
        result = BranchAvailabilityService.strip_remote_prefix("other/x/y", remotes=["origin"])
        assert result == "x/y"
