"""JSON-backed storage for saved directory shortcuts.

The store persists the saved-directory list and the optional default directory
in a small JSON file:

    {"saved_directories": ["Transcripts", "Notes/YouTube"],
     "default_directory": "Transcripts"}

List rules (normalization, de-duplication, index checks) live in
``core.directories``; this module only loads, applies and saves.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core import directories

logger = logging.getLogger(__name__)


@dataclass
class DirectoryConfig:
    """Saved directory shortcuts and the preselected default."""

    saved_directories: list[str] = field(default_factory=list)
    default_directory: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON export."""
        return {
            "saved_directories": list(self.saved_directories),
            "default_directory": self.default_directory,
        }


class DirectoryStore:
    """File-based store for the saved directory list."""

    def __init__(
        self,
        store_path: Path,
        initial_directories: list[str] | None = None,
        initial_default: str | None = None,
    ):
        """Initialize store.

        Args:
            store_path: JSON file holding the saved directories
            initial_directories: Saved list used when the file does not exist yet
            initial_default: Default directory used when the file does not exist yet
        """
        self.store_path = store_path
        self._initial_directories = list(initial_directories or [])
        self._initial_default = initial_default
        logger.debug(f"Directory store at {store_path}")

    def _initial_config(self) -> DirectoryConfig:
        saved = directories.clean_saved_directories(self._initial_directories)
        default = directories.validate_default_directory(
            directories.normalize_directory(self._initial_default or ""), saved
        )
        return DirectoryConfig(saved_directories=saved, default_directory=default)

    def load(self) -> DirectoryConfig:
        """Load the saved directories, falling back to the initial values."""
        if not self.store_path.exists():
            return self._initial_config()

        try:
            with open(self.store_path, encoding="utf-8") as f:
                raw: dict[str, Any] = json.load(f)
            saved_raw = raw.get("saved_directories") or []
            if not isinstance(saved_raw, list):
                raise ValueError("saved_directories must be a list")
            entries = [d for d in saved_raw if isinstance(d, str)]
            if len(entries) != len(saved_raw):
                logger.warning(
                    f"Ignoring {len(saved_raw) - len(entries)} non-text entries in {self.store_path}"
                )
            saved = directories.clean_saved_directories(entries)
            default_raw = raw.get("default_directory")
        except (json.JSONDecodeError, ValueError, AttributeError, OSError) as e:
            logger.warning(f"Failed to read directory store {self.store_path}: {e}")
            return self._initial_config()

        default = directories.validate_default_directory(
            directories.normalize_directory(default_raw) if isinstance(default_raw, str) else None,
            saved,
        )
        return DirectoryConfig(saved_directories=saved, default_directory=default)

    def save(self, config: DirectoryConfig) -> None:
        """Write the configuration to disk."""
        self.store_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.store_path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        logger.debug(f"Directory store saved: {len(config.saved_directories)} directories")

    def add(self, path: str) -> bool:
        """Add a saved directory. Returns False if it was a duplicate or blank."""
        config = self.load()
        added = directories.add_saved_directory(config.saved_directories, path)
        if added:
            self.save(config)
            logger.info(f"Saved directory added: {config.saved_directories[-1]}")
        return added

    def remove(self, index: int) -> str:
        """Remove the saved directory at ``index`` and return it.

        Raises:
            DirectoryIndexError: If ``index`` is out of range
        """
        config = self.load()
        removed = directories.remove_saved_directory(config.saved_directories, index)
        config.default_directory = directories.validate_default_directory(
            config.default_directory, config.saved_directories
        )
        self.save(config)
        logger.info(f"Saved directory removed: {removed}")
        return removed

    def set_default(self, path: str | None) -> str | None:
        """Set (or clear with None) the default directory.

        Raises:
            ValueError: If ``path`` is not one of the saved directories
        """
        config = self.load()
        default = directories.normalize_directory(path) if path is not None else None
        if default and default not in config.saved_directories:
            raise ValueError(f"'{default}' is not a saved directory")

        config.default_directory = default or None
        self.save(config)
        logger.info(f"Default directory set to: {config.default_directory or '<current directory>'}")
        return config.default_directory
