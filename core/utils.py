"""Core utilities for note filenames and paths.

These functions are used by the saving service and the CLI and are kept free of
filesystem access except for ensure_dir_exists.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path

from core.directories import build_target_path


logger = logging.getLogger(__name__)

MAX_FILENAME_LENGTH = 100


def sanitize_filename(title: str) -> str:
    """
    Limpia un título de video para usarlo como nombre de archivo.
    - Elimina los caracteres no válidos en nombres de archivo (<>:"/\\|?*).
    - Reemplaza espacios múltiples con un solo espacio.
    - Elimina espacios al inicio/final.
    - Limita la longitud a MAX_FILENAME_LENGTH caracteres.
    """
    text = re.sub(r'[<>:"/\\|?*]', "", title)
    text = re.sub(r"\s+", " ", text)
    return text.strip()[:MAX_FILENAME_LENGTH]


def unique_note_path(
    directory: str,
    base_name: str,
    extension: str,
    exists: Callable[[str], bool],
) -> str:
    """Pick the first free vault path for a note.

    Tries ``<directory>/<base_name>.<ext>`` and then ``<base_name> (1).<ext>``,
    ``<base_name> (2).<ext>`` and so on.

    Args:
        directory: Normalized vault directory ("" for the root)
        base_name: Sanitized note title
        extension: File extension without the dot
        exists: Predicate telling whether a vault path is taken

    Returns:
        Vault-relative path that ``exists`` reported as free
    """
    candidate = build_target_path(directory, f"{base_name}.{extension}")
    counter = 1
    while exists(candidate):
        candidate = build_target_path(directory, f"{base_name} ({counter}).{extension}")
        counter += 1
    return candidate


def ensure_dir_exists(dir_path: Path) -> None:
    """
    Asegura que un directorio exista. Si no, lo crea.
    """
    if not dir_path.is_dir():
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
            logger.info(f"Directorio creado: {dir_path}")
        except OSError as e:
            logger.error(f"Error al crear el directorio {dir_path}: {e}")
            raise
    else:
        logger.debug(f"Directorio ya existe: {dir_path}")
