"""
Configuration du logging de l'application via loguru.

Trois sorties :
- Console : lisible, colorée, au niveau choisi par l'utilisateur
- Journal applicatif : JSON avec rotation, tous niveaux
- Journal de sécurité : JSON, uniquement les évènements liés avec security=True
  (identité inconnue, mot de passe invalide), à partir de WARNING

Le CLI et l'application web passent tous deux par configure_from_settings.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def is_security_event(record: dict) -> bool:
    """Filtre loguru : retient les enregistrements émis par security_logger."""
    return record["extra"].get("security") is True


def _add_json_sink(path: Path, level: str, rotation_size: str, retention_count: int, **options) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        path,
        level=level,
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
        **options,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/catalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    security_log_file: Optional[Path] = None,
) -> None:
    """Configure les sorties de log, en remplaçant celles déjà installées.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Journal applicatif JSON
        rotation_size : Taille maximale d'un fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
        security_log_file : Journal de sécurité (aucun si None)
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)
    _add_json_sink(log_file, "DEBUG", rotation_size, retention_count)

    if security_log_file is not None:
        _add_json_sink(
            security_log_file,
            "WARNING",
            rotation_size,
            retention_count,
            filter=is_security_event,
        )

    logger.debug(
        "Logging configuré",
        log_file=str(log_file),
        security_log_file=str(security_log_file) if security_log_file else None,
    )


def configure_from_settings(settings: Settings) -> None:
    """Applique la section logging des paramètres."""
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        security_log_file=settings.security_log_file,
    )
