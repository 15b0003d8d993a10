"""Transcript notes service - orchestration for saving a transcript as a note.

This module centralizes the save flow used by the CLI:
Resolve directory → Sanitize title → Pick free path → (Create directory) → Write

Transcript fetching happens upstream; this layer receives the text and owns the
filesystem side of the workflow. Directory and path rules come from
``core.directories`` and ``core.utils``.
"""

import logging
from pathlib import Path

from core import directories, utils
from core.models import DirectorySelection, NoteTarget, UseActiveDocumentDirectory
from core.video_id import normalize_video_url

logger = logging.getLogger(__name__)


def plan_note(
    title: str,
    selection: DirectorySelection | str | None,
    active_document_path: str | None,
    vault_dir: Path,
    extension: str = "md",
) -> NoteTarget:
    """Decide where a new transcript note goes inside the vault.

    Args:
        title: Video title (sanitized here)
        selection: Target directory choice (None = active document's directory)
        active_document_path: Vault path of the open document, if any
        vault_dir: Vault root on disk, used to skip taken filenames
        extension: Note extension without the dot

    Returns:
        NoteTarget with the resolved directory and a free vault-relative path

    Raises:
        MissingActiveDocumentError: Current directory requested with no open document
    """
    directory = directories.resolve_active_directory(selection, active_document_path)
    base_name = utils.sanitize_filename(title) or "untitled"

    path = utils.unique_note_path(
        directory,
        base_name,
        extension,
        exists=lambda candidate: (vault_dir / candidate).exists(),
    )
    target = NoteTarget(
        directory=directory,
        path=path,
        create_directory=directories.should_create_directory(directory),
    )
    logger.debug(f"Planned note: {target}")
    return target


def build_note_content(
    transcript: str,
    video_url: str,
    title: str,
    include_video_url: bool = False,
) -> str:
    """Build the note body: optional video embed, then the transcript."""
    parts: list[str] = []
    if include_video_url:
        parts.append(f"![{title}]({normalize_video_url(video_url)})")
    parts.append(transcript)
    return "\n\n".join(parts)


def save_note(target: NoteTarget, content: str, vault_dir: Path) -> Path:
    """Write a planned note to disk, never replacing an existing file.

    Returns:
        Absolute path of the written note

    Raises:
        FileExistsError: If the note path was taken after planning
        OSError: If the directory or the file cannot be written
    """
    if target.create_directory:
        utils.ensure_dir_exists(vault_dir / target.directory)

    note_path = vault_dir / target.path
    try:
        with open(note_path, "x", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error al guardar la nota en {note_path}: {e}")
        raise

    logger.info(f"Nota guardada en: {note_path}")
    return note_path


def save_transcript_note(
    video_url: str,
    title: str,
    transcript: str,
    selection: DirectorySelection | str | None,
    active_document_path: str | None,
    vault_dir: Path,
    extension: str = "md",
    include_video_url: bool = False,
) -> Path:
    """Plan, build and write a transcript note in one step.

    If the planned directory cannot be created (for example a file already has
    its name), the note goes next to the active document instead.

    Raises:
        ValueError: If the transcript is empty
        MissingActiveDocumentError: Current directory requested with no open document
        OSError: If the note cannot be written
    """
    if not transcript or not transcript.strip():
        raise ValueError("Transcript is empty")

    target = plan_note(title, selection, active_document_path, vault_dir, extension)
    if target.create_directory:
        try:
            utils.ensure_dir_exists(vault_dir / target.directory)
        except OSError:
            if active_document_path is None:
                raise
            logger.warning(
                f"No se pudo crear {target.directory}, usando el directorio del documento activo"
            )
            target = plan_note(
                title, UseActiveDocumentDirectory(), active_document_path, vault_dir, extension
            )

    content = build_note_content(transcript, video_url, title, include_video_url)
    return save_note(target, content, vault_dir)


__all__ = ["build_note_content", "plan_note", "save_note", "save_transcript_note"]
