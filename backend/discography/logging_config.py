"""Logging configuration for Discography."""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from discography.config import settings


def setup_logging():
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    # Handlers pass INFO so song edits reach them under a stricter LOG_LEVEL
    handler_level = min(log_level, logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)

    handlers = [console_handler]

    # File handler (if log path configured)
    if settings.log_path:
        log_file = Path(settings.log_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers
    )

    # Application loggers follow LOG_LEVEL, except song edits (kept at INFO)
    # and per-lookup iTunes debug output
    logging.getLogger("discography").setLevel(log_level)
    logging.getLogger("discography.services.songs").setLevel(min(log_level, logging.INFO))
    logging.getLogger("discography.integrations.itunes").setLevel(max(log_level, logging.INFO))

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
