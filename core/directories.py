"""Target directory resolution and saved-directory maintenance.

All functions here are pure: they take the saved list, the selection and the
active document path as arguments and never touch the filesystem. Paths are
vault-relative and use ``/`` as separator; ``""`` is the vault root.
"""

import logging
import re

from core.models import DirectorySelection, UseActiveDocumentDirectory, UseExplicitDirectory

logger = logging.getLogger(__name__)

_EDGE_SEPARATORS = re.compile(r"^[\s/]+|[\s/]+$")


class DirectoryIndexError(IndexError):
    """Raised when removing a saved directory by an out-of-range index."""

    pass


class MissingActiveDocumentError(ValueError):
    """Raised when the current directory is requested but no document is open."""

    pass


def normalize_directory(path: str) -> str:
    """Normalize a vault directory path.

    Backslashes become forward slashes, then every run of whitespace and ``/``
    at either end is removed. A separator revealed by trimming (``"\\\\a"``,
    ``"/ a"``) is stripped as well, so normalizing twice changes nothing.

    Examples:
        >>> normalize_directory("/Transcripts/")
        'Transcripts'
        >>> normalize_directory("Notes\\\\YouTube")
        'Notes/YouTube'
    """
    return _EDGE_SEPARATORS.sub("", path.replace("\\", "/"))


def as_selection(selection: DirectorySelection | str | None) -> DirectorySelection:
    """Coerce a raw widget value into a DirectorySelection.

    ``None`` means "use the active document's directory"; any string, including
    ``""``, is an explicit directory.
    """
    if selection is None:
        return UseActiveDocumentDirectory()
    if isinstance(selection, str):
        return UseExplicitDirectory(selection)
    return selection


def selection_from_choice(value: str | None) -> DirectorySelection:
    """Map the directory dropdown value to a selection.

    The dropdown's "Current directory" entry carries an empty value, so both
    ``None`` and ``""`` select the active document's directory here.
    """
    if not value:
        return UseActiveDocumentDirectory()
    return UseExplicitDirectory(value)


def resolve_active_directory(
    selection: DirectorySelection | str | None,
    active_document_path: str | None,
) -> str:
    """Resolve the directory a new note should be written to.

    Args:
        selection: Where the user asked to save (None = current directory)
        active_document_path: Vault path of the open document, if any

    Returns:
        Normalized vault-relative directory ("" for the vault root)

    Raises:
        MissingActiveDocumentError: Current directory requested with no open document
    """
    selection = as_selection(selection)

    if isinstance(selection, UseExplicitDirectory):
        return normalize_directory(selection.path)

    if active_document_path is None:
        raise MissingActiveDocumentError(
            "Cannot determine directory: no active file and no directory specified"
        )

    # A document at the vault root has no "/" and resolves to ""
    directory = active_document_path[: max(active_document_path.rfind("/"), 0)]
    logger.debug(f"Directory derived from active document {active_document_path!r}: {directory!r}")
    return normalize_directory(directory)


def build_target_path(directory: str, filename: str) -> str:
    """Join a vault directory and a filename ("" directory means vault root)."""
    if directory:
        return f"{directory}/{filename}"
    return filename


def should_create_directory(directory: str) -> bool:
    """A directory only needs creating when it is not the vault root."""
    return directory.strip() != ""


def add_saved_directory(directories: list[str], path: str) -> bool:
    """Append a normalized directory to the saved list unless already present.

    Args:
        directories: Saved list, mutated in place
        path: Directory as typed by the user

    Returns:
        True if the directory was appended, False if it was a duplicate or blank
    """
    normalized = normalize_directory(path)
    if not normalized:
        logger.debug("Ignoring blank saved directory")
        return False

    if normalized in (normalize_directory(d) for d in directories):
        logger.debug(f"Saved directory already present: {normalized}")
        return False

    directories.append(normalized)
    return True


def remove_saved_directory(directories: list[str], index: int) -> str:
    """Remove and return the saved directory at ``index``.

    Raises:
        DirectoryIndexError: If ``index`` is outside ``[0, len(directories))``
    """
    if not 0 <= index < len(directories):
        raise DirectoryIndexError(
            f"Directory index {index} out of range for {len(directories)} saved directories"
        )
    return directories.pop(index)


def clean_saved_directories(values: list[str]) -> list[str]:
    """Normalize a persisted list, dropping blanks and duplicates (first wins)."""
    cleaned: list[str] = []
    for value in values:
        add_saved_directory(cleaned, value)
    return cleaned


def validate_default_directory(
    default_directory: str | None, saved_directories: list[str]
) -> str | None:
    """Drop a default directory that is no longer one of the saved entries."""
    if not default_directory:
        return None
    if default_directory not in saved_directories:
        logger.debug(f"Default directory {default_directory!r} is not saved; clearing it")
        return None
    return default_directory


def default_selection(
    default_directory: str | None, saved_directories: list[str]
) -> DirectorySelection:
    """Selection to preselect: the saved default, else the current directory."""
    default_directory = validate_default_directory(default_directory, saved_directories)
    if default_directory is None:
        return UseActiveDocumentDirectory()
    return UseExplicitDirectory(default_directory)


__all__ = [
    "DirectoryIndexError",
    "MissingActiveDocumentError",
    "add_saved_directory",
    "as_selection",
    "build_target_path",
    "clean_saved_directories",
    "default_selection",
    "normalize_directory",
    "remove_saved_directory",
    "resolve_active_directory",
    "selection_from_choice",
    "should_create_directory",
    "validate_default_directory",
]
