"""
Configuration du logging de RestAPI via loguru.

Deux sorties :
- stderr : lisible, colorée, au niveau RESTAPI_LOG_LEVEL
- fichier : JSON avec rotation (RESTAPI_LOG_FILE), tous niveaux

Les loggers standards d'uvicorn sont redirigés vers loguru pour que les
requêtes HTTP arrivent dans les mêmes sorties que les logs des services.
"""

import logging
import sys

from loguru import logger

from .config import Settings

# Loggers stdlib redirigés vers loguru
_INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Transmet les enregistrements du module logging à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Settings) -> None:
    """Configure loguru et la redirection des loggers stdlib depuis les paramètres."""
    logger.remove()

    logger.add(sys.stderr, level=settings.log_level, format=_CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    handler = InterceptHandler()
    for name in _INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )
