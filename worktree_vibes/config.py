"""Configuration handling for worktree-vibes"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from worktree_vibes.constants import CONFIG_DIR, CONFIG_ENV_VAR, CONFIG_FILE_NAME


@dataclass
class Config:
    """Options for a worktree-vibes picker session, with validation."""

    # Default path store location (None = WORKTREE_VIBES_CONFIG or ~/.worktree-vibes)
    config_path: Optional[str] = None

    # Worktree operations
    force_remove: bool = False  # Pass --force to `git worktree remove`
    include_remote: bool = True  # Offer remote branches in the create flow

    # Execution modes
    verbose: bool = False
    debug: bool = False

    # Picker presentation
    title: str = "Git Worktrees"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_title()
        self._validate_config_path()

    def _validate_title(self):
        """Validate title is not empty."""
        if not self.title or not self.title.strip():
            raise ValueError("title cannot be empty")
        self.title = self.title.strip()

    def _validate_config_path(self):
        """Validate config_path is not blank when given."""
        if self.config_path is not None and not self.config_path.strip():
            raise ValueError("config_path cannot be blank")

    def resolve_config_path(self) -> Path:
        """Return the file the default path store reads and writes."""
        if self.config_path:
            return Path(os.path.expanduser(self.config_path))
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(os.path.expanduser(env_path))
        return CONFIG_DIR / CONFIG_FILE_NAME

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "config_path": self.config_path,
            "force_remove": self.force_remove,
            "include_remote": self.include_remote,
            "verbose": self.verbose,
            "debug": self.debug,
            "title": self.title,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "config_path",
            "force_remove",
            "include_remote",
            "verbose",
            "debug",
            "title",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
