"""
Logging configuration for primkit.

Loggers are console-only unless ``PRIMKIT_LOG_DIR`` is set, in which case
each logger also writes to its own rotating file under that directory.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

from primkit.core.config import normalize_log_level, settings

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(name: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_dir / f"{name.replace('.', '_')}.log",
                maxBytes=settings.LOG_MAX_BYTES,
                backupCount=settings.LOG_BACKUP_COUNT,
            )
        )

    return handlers


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger for a primkit module.

    Args:
        name: Logger name (usually __name__)
        level: Level name overriding ``PRIMKIT_LOG_LEVEL``, any case

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    log_level = normalize_log_level(level) if level else settings.LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Handlers are attached once; later calls only adjust the level
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in _build_handlers(name):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger
