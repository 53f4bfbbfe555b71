"""Tests for logging setup"""
import logging

import pytest

from worktree_vibes.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_logger_names_drop_package_prefix():
    assert get_logger("worktree_vibes.core").name == "core"
    assert get_logger("worktree_vibes.services.git.runner").name == "services.git.runner"


def test_tui_mode_logs_only_to_file(temp_dir):
    log_file = temp_dir / "logs" / "run.log"
    setup_logging(tui_mode=True, log_file=log_file)

    get_logger("worktree_vibes.core").debug("listing worktrees")
    for handler in logging.getLogger().handlers:
        handler.flush()

    handlers = logging.getLogger().handlers
    assert [type(h) for h in handlers] == [logging.FileHandler]
    assert "core - DEBUG - listing worktrees" in log_file.read_text()


def test_cli_mode_levels(temp_dir):
    setup_logging(verbose=True, log_file=temp_dir / "unused.log")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]
    assert not (temp_dir / "unused.log").exists()
    assert logging.getLogger("git").level == logging.WARNING
