"""Shared data models for the transcript notes tool.

Cross-module models used by the resolvers, the saving service and the CLI.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UseActiveDocumentDirectory:
    """Save next to the document that is currently open."""

    def __str__(self) -> str:
        return "<current directory>"


@dataclass(frozen=True)
class UseExplicitDirectory:
    """Save into a specific vault directory ("" is the vault root)."""

    path: str

    def __str__(self) -> str:
        return self.path or "<vault root>"


DirectorySelection = UseActiveDocumentDirectory | UseExplicitDirectory


@dataclass(frozen=True)
class VideoReference:
    """A recognised YouTube video."""

    video_id: str
    url: str  # Canonical watch URL


@dataclass
class NoteTarget:
    """Where a transcript note will be written, relative to the vault root."""

    directory: str
    path: str
    create_directory: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON export."""
        return {
            "directory": self.directory,
            "path": self.path,
            "create_directory": self.create_directory,
        }


__all__ = [
    "DirectorySelection",
    "NoteTarget",
    "UseActiveDocumentDirectory",
    "UseExplicitDirectory",
    "VideoReference",
]
