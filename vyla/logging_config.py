"""
Configuration du logging via loguru.

- Sortie console : colorée, lisible, niveau configurable
- Sortie fichier (optionnelle) : JSON avec rotation
- Les loggers standard d'uvicorn et d'httpx sont redirigés vers loguru
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Loggers de la bibliothèque standard redirigés vers loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx")


class InterceptHandler(logging.Handler):
    """Transmet les enregistrements du module logging à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_std_logging(log_level: str) -> None:
    """Le filtrage par niveau est laissé aux sinks loguru."""
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.setLevel(logging.DEBUG)
        std_logger.propagate = False
    # httpx journalise chaque requête en INFO ; le client TMDB le fait déjà en DEBUG
    if log_level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure loguru pour le serveur et la CLI.

    Args :
        log_level : Niveau minimum sur la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON (None = console uniquement)
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    log_level = log_level.upper()
    logger.remove()

    # Les champs passés en kwargs (path, status...) sont affichés via {extra}
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level> <dim>{extra}</dim>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    intercept_std_logging(log_level)
    logger.debug("Logging configuré", log_file=str(log_file) if log_file else None)
