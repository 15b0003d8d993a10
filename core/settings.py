"""Shared application settings for the transcript notes tool.

This module contains the validated Pydantic settings used across all modules
(core resolvers, directory store, saving service and CLI).

All environment variables, vault paths and note options are centralized here
to provide a single source of truth for configuration.
"""

import sys
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Cargar variables de entorno desde un archivo .env si existe
load_dotenv()


class AppSettings(BaseSettings):
    """
    Configuraciones de la aplicación, validadas con Pydantic.
    Lee variables de entorno y aplica valores por defecto.
    """

    model_config = SettingsConfigDict(case_sensitive=False)

    # ========== VAULT CONFIGURATION ==========

    VAULT_DIR: Path = Field(
        default=Path("vault/"),
        description="Raíz del vault donde se guardan las notas",
    )
    DIRECTORY_STORE_PATH: Path = Field(
        default=Path(".transcript_notes/directories.json"),
        description="Archivo JSON con los directorios guardados",
    )
    DEFAULT_DIRECTORY: str | None = Field(
        default=None,
        description="Directorio por defecto (debe estar en SAVED_DIRECTORIES)",
    )
    SAVED_DIRECTORIES: list[str] = Field(
        default_factory=list,
        description="Lista inicial de directorios guardados (JSON en el entorno)",
    )

    # ========== NOTE OPTIONS ==========

    NOTE_FILE_EXTENSION: str = Field(
        default="md",
        description="Extensión de las notas generadas",
    )
    INCLUDE_VIDEO_URL: bool = Field(
        default=False,
        description="Incluir el enlace al video al inicio de la nota",
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging",
    )

    @field_validator("NOTE_FILE_EXTENSION")
    @classmethod
    def _strip_extension_dot(cls, value: str) -> str:
        return value.strip().lstrip(".") or "md"

    @field_validator("DEFAULT_DIRECTORY")
    @classmethod
    def _blank_default_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value


# Crear una instancia global de las configuraciones validadas
try:
    settings = AppSettings()
except Exception as e:
    sys.stderr.write(f"CRITICAL: Error al cargar o validar la configuración: {e}\n")
    sys.exit(1)


__all__ = ["AppSettings", "settings"]
