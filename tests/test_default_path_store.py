"""Tests for DefaultPathStore"""
import json
import os
from unittest.mock import patch

import pytest

from worktree_vibes.exceptions import ConfigStoreError
from worktree_vibes.services.default_path_store import DefaultPathStore


@pytest.fixture
def store(temp_dir):
    return DefaultPathStore(temp_dir / "config" / "worktree-vibes.json")


class TestLoad:
    """Test loading the mapping."""

    def test_missing_file(self, store):
        assert store.load() == {}

    def test_invalid_json(self, store):
        store.config_file.parent.mkdir(parents=True)
        store.config_file.write_text("{not json")
        assert store.load() == {}

    def test_non_object_json(self, store):
        store.config_file.parent.mkdir(parents=True)
        store.config_file.write_text('["/a"]')
        assert store.load() == {}

    def test_existing_mapping(self, store):
        store.config_file.parent.mkdir(parents=True)
        store.config_file.write_text(json.dumps({"/repo": "/wt/"}))
        assert store.load() == {"/repo": "/wt/"}
        assert store.get_default("/repo") == "/wt/"
        assert store.get_default("/other") is None


class TestSetDefault:
    """Test setting and persisting defaults."""

    def test_expands_home_and_adds_separator(self, store):
        path = store.set_default("/repo", "~/x")

        expected = os.path.join(os.path.expanduser("~"), "x") + os.sep
        assert path == expected
        assert store.load()["/repo"] == expected
        assert store.load()["/repo"].endswith("x" + os.sep)
        assert not store.load()["/repo"].endswith(os.sep * 2)

    def test_single_trailing_separator(self, store):
        path = store.set_default("/repo", f"/tmp/worktrees{os.sep}{os.sep}")
        assert path == f"/tmp/worktrees{os.sep}"

    def test_expands_environment_variables(self, store, monkeypatch):
        monkeypatch.setenv("WT_BASE", "/data/wt")
        assert store.set_default("/repo", "$WT_BASE/proj") == f"/data/wt/proj{os.sep}"

    def test_merges_with_existing_keys(self, store):
        store.set_default("/repo-one", "/a")
        store.set_default("/repo-two", "/b")
        assert store.load() == {"/repo-one": "/a/", "/repo-two": "/b/"}

    def test_recovers_from_invalid_json(self, store):
        """Invalid JSON is replaced by a valid single-key object."""
        store.config_file.parent.mkdir(parents=True)
        store.config_file.write_text("}}}")

        store.set_default("/repo", "/wt")

        assert json.loads(store.config_file.read_text()) == {"/repo": "/wt/"}

    def test_no_temp_file_left_behind(self, store):
        store.set_default("/repo", "/wt")
        assert list(store.config_file.parent.iterdir()) == [store.config_file]

    def test_save_failure_keeps_session_default(self, store):
        with patch("builtins.open", side_effect=PermissionError("read-only")):
            with pytest.raises(ConfigStoreError):
                store.set_default("/repo", "/wt")

        assert store.get_default("/repo") == "/wt/"
        assert not store.config_file.exists()
