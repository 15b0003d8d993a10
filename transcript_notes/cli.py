"""CLI for resolving video IDs, planning note paths and saving transcript notes."""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from core import directories
from core.directory_store import DirectoryStore
from core.models import DirectorySelection, UseActiveDocumentDirectory, UseExplicitDirectory
from core.settings import settings
from core.video_id import parse_video_reference
from transcript_notes import service

logger = logging.getLogger(__name__)


def setup_logging():
    """Configura el logging basico para la aplicacion."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def get_directory_store() -> DirectoryStore:
    """Build the directory store from the current settings."""
    return DirectoryStore(
        settings.DIRECTORY_STORE_PATH,
        initial_directories=settings.SAVED_DIRECTORIES,
        initial_default=settings.DEFAULT_DIRECTORY,
    )


def _selection_from_args(args) -> DirectorySelection:
    """--current wins, then an explicit --directory, then the saved default."""
    if args.current:
        return UseActiveDocumentDirectory()
    if args.directory is not None:
        return UseExplicitDirectory(args.directory)
    config = get_directory_store().load()
    return directories.default_selection(config.default_directory, config.saved_directories)


def command_video_id(args):
    """Command handler for extracting a video ID from a URL or bare ID."""
    setup_logging()

    reference = parse_video_reference(args.input)
    if reference is None:
        _fail(f"Invalid YouTube URL or video ID: {args.input}")

    print(reference.video_id)
    print(reference.url)


def command_target(args):
    """Command handler for printing where a note would be saved."""
    setup_logging()

    selection = _selection_from_args(args)
    try:
        target = service.plan_note(
            title=args.title,
            selection=selection,
            active_document_path=args.active,
            vault_dir=settings.VAULT_DIR,
            extension=settings.NOTE_FILE_EXTENSION,
        )
    except directories.MissingActiveDocumentError as e:
        _fail(f"{e}. Open a file first or pass --directory.")

    logger.info(f"Directorio destino ({selection}): {target.directory or '<vault root>'}")
    print(target.path)


def command_save(args):
    """Command handler for saving a transcript file as a note in the vault."""
    setup_logging()

    reference = parse_video_reference(args.url)
    if reference is None:
        _fail(f"Invalid YouTube URL or video ID: {args.url}")

    transcript_file = Path(args.transcript_file)
    try:
        transcript = transcript_file.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"No se pudo leer la transcripcion {transcript_file}: {e}")

    selection = _selection_from_args(args)
    try:
        note_path = service.save_transcript_note(
            video_url=reference.url,
            title=args.title or reference.video_id,
            transcript=transcript,
            selection=selection,
            active_document_path=args.active,
            vault_dir=settings.VAULT_DIR,
            extension=settings.NOTE_FILE_EXTENSION,
            include_video_url=args.include_url or settings.INCLUDE_VIDEO_URL,
        )
    except (ValueError, OSError) as e:
        _fail(str(e))

    logger.info("Proceso completado exitosamente.")
    print(note_path)


def command_dirs(args):
    """Command handler for managing saved directory shortcuts."""
    setup_logging()
    store = get_directory_store()

    if args.dirs_command == "add":
        if not store.add(args.path):
            logger.warning(f"Directorio ignorado (vacio o duplicado): {args.path!r}")
    elif args.dirs_command == "remove":
        try:
            store.remove(args.index)
        except directories.DirectoryIndexError as e:
            _fail(str(e))
    elif args.dirs_command == "default":
        try:
            store.set_default(None if args.clear else args.path)
        except ValueError as e:
            _fail(str(e))

    config = store.load()
    for index, directory in enumerate(config.saved_directories):
        marker = " (default)" if directory == config.default_directory else ""
        print(f"{index}: {directory}{marker}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="YouTube Transcript Notes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Comandos disponibles")

    # Subcommand: video-id
    video_id_parser = subparsers.add_parser(
        "video-id",
        help="Extrae el ID de un video de YouTube desde una URL o un ID",
    )
    video_id_parser.add_argument("input", type=str, help="URL de YouTube o ID del video.")

    # Shared directory options for target/save
    directory_parent = argparse.ArgumentParser(add_help=False)
    directory_group = directory_parent.add_mutually_exclusive_group()
    directory_group.add_argument(
        "-d",
        "--directory",
        type=str,
        default=None,
        help="Directorio del vault donde guardar la nota ('' para la raiz).",
    )
    directory_group.add_argument(
        "--current",
        action="store_true",
        help="Guardar junto al documento activo (ignora el directorio por defecto).",
    )
    directory_parent.add_argument(
        "-a",
        "--active",
        type=str,
        default=None,
        help="Ruta en el vault del documento activo (ej. 'Notes/Current.md').",
    )

    # Subcommand: target
    target_parser = subparsers.add_parser(
        "target",
        parents=[directory_parent],
        help="Muestra la ruta donde se guardaria la nota",
    )
    target_parser.add_argument("-t", "--title", required=True, type=str, help="Titulo del video.")

    # Subcommand: save
    save_parser = subparsers.add_parser(
        "save",
        parents=[directory_parent],
        help="Guarda una transcripcion como nota en el vault",
    )
    save_parser.add_argument("-u", "--url", required=True, type=str, help="URL o ID del video.")
    save_parser.add_argument("-t", "--title", type=str, default=None, help="Titulo del video.")
    save_parser.add_argument(
        "-f",
        "--transcript-file",
        required=True,
        type=str,
        help="Archivo de texto con la transcripcion.",
    )
    save_parser.add_argument(
        "--include-url",
        action="store_true",
        help="Incluir el enlace al video al inicio de la nota.",
    )

    # Subcommand: dirs
    dirs_parser = subparsers.add_parser("dirs", help="Gestiona los directorios guardados")
    dirs_subparsers = dirs_parser.add_subparsers(dest="dirs_command")
    dirs_subparsers.add_parser("list", help="Lista los directorios guardados")
    add_parser = dirs_subparsers.add_parser("add", help="Guarda un directorio")
    add_parser.add_argument("path", type=str)
    remove_parser = dirs_subparsers.add_parser("remove", help="Elimina un directorio por indice")
    remove_parser.add_argument("index", type=int)
    default_parser = dirs_subparsers.add_parser("default", help="Fija el directorio por defecto")
    default_group = default_parser.add_mutually_exclusive_group(required=True)
    default_group.add_argument("path", nargs="?", type=str, default=None)
    default_group.add_argument("--clear", action="store_true")

    return parser


def main(argv: list[str] | None = None):
    """Punto de entrada principal para el CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "video-id":
        command_video_id(args)
    elif args.command == "target":
        command_target(args)
    elif args.command == "save":
        command_save(args)
    elif args.command == "dirs":
        command_dirs(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
