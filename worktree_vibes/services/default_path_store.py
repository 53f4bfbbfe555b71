"""Per-repository default parent directory for new worktrees."""
import json
import os
from pathlib import Path
from typing import Dict, Optional

from worktree_vibes.exceptions import ConfigStoreError
from worktree_vibes.logging_config import get_logger

logger = get_logger(__name__)


class DefaultPathStore:
    """Maps repository roots to the directory new worktrees are created in.

    The mapping lives in a single JSON object on disk. It is re-read on every
    lookup and rewritten as a whole on every change.
    """

    def __init__(self, config_file: Path):
        """Initialize the store.

        Args:
            config_file: JSON file holding the mapping
        """
        self.config_file = Path(config_file)
        # Defaults set during this process whose save failed
        self._session_defaults: Dict[str, str] = {}

    def load(self) -> Dict[str, str]:
        """Load the mapping from disk.

        Returns:
            Mapping of repository root to default path; empty if the file is
            missing or does not hold a JSON object
        """
        if not self.config_file.exists():
            logger.debug("No default path config found")
            return {}

        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in config file: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Failed to read config file: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Config file does not contain a JSON object, ignoring it")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self, mapping: Dict[str, str]) -> None:
        """Overwrite the config file with the whole mapping using an atomic write.

        Raises:
            ConfigStoreError: If the file cannot be written
        """
        temp_file = self.config_file.with_suffix('.tmp')
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w') as f:
                json.dump(mapping, f, indent=2, sort_keys=True)
                f.flush()

            # Atomic rename (POSIX systems guarantee atomicity)
            temp_file.replace(self.config_file)
            logger.debug(f"Saved {len(mapping)} default paths to {self.config_file}")
        except OSError as e:
            raise ConfigStoreError(str(self.config_file), str(e)) from e
        finally:
            if temp_file.exists():
                try:
                    temp_file.unlink()
                except OSError:
                    logger.debug(f"Could not remove temp file {temp_file}")

    def get_default(self, repo_root: str) -> Optional[str]:
        """Get the default worktree directory for a repository, if one is set."""
        if repo_root in self._session_defaults:
            return self._session_defaults[repo_root]
        return self.load().get(repo_root)

    @staticmethod
    def normalize_path(raw_path: str) -> str:
        """Expand `~` and environment variables and ensure one trailing separator."""
        expanded = os.path.expandvars(os.path.expanduser(raw_path.strip()))
        return expanded.rstrip(os.sep) + os.sep

    def set_default(self, repo_root: str, raw_path: str) -> str:
        """Set and persist the default worktree directory for a repository.

        The new default is usable for the rest of this process even if the
        save fails.

        Args:
            repo_root: Repository root path (mapping key)
            raw_path: Directory as typed by the user

        Returns:
            The stored, normalized path

        Raises:
            ConfigStoreError: If the config file cannot be written
        """
        path = self.normalize_path(raw_path)
        self._session_defaults[repo_root] = path

        mapping = self.load()
        mapping[repo_root] = path
        self.save(mapping)

        # Saved, so the file is authoritative again
        del self._session_defaults[repo_root]
        logger.info(f"Default worktree path for {repo_root} set to {path}")
        return path
