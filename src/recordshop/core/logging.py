"""
RecordShop Logging Configuration
Structured logging setup with optional file rotation
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Optional

import structlog
from pythonjsonlogger.json import JsonFormatter

from .config import RecordShopSettings, get_settings


def setup_logging(settings: Optional[RecordShopSettings] = None) -> logging.Logger:
    """Set up structured logging for RecordShop"""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    # Console handler with colored output for development
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if settings.is_development:
        console_formatter = logging.Formatter(
            '\033[92m%(asctime)s\033[0m - '
            '\033[94m%(name)s\033[0m - '
            '%(levelname)s - '
            '%(message)s',
            datefmt='%H:%M:%S'
        )
    else:
        # JSON formatter for production
        console_formatter = JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(message)s'
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE_PATH:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            settings.LOG_FILE_PATH,
            maxBytes=settings.LOG_MAX_SIZE,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(pathname)s %(lineno)d %(funcName)s %(message)s'
        ))
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if not settings.is_development
            else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # uvicorn keeps its own level regardless of LOG_LEVEL
    logging.getLogger("uvicorn").setLevel(logging.INFO)

    logger = logging.getLogger("recordshop")
    logger.info(f"Logging configured - Level: {settings.LOG_LEVEL}")

    return logger


class AlbumStoreLogger:
    """Specialized logger for album store operations"""

    def __init__(self):
        self.logger = structlog.get_logger("recordshop.store")

    def log_albums_listed(self, count: int) -> None:
        """Log a full catalogue read"""
        self.logger.debug("Albums listed", count=count)

    def log_album_created(self, album_id: str, title: str, total: int, **kwargs: Any) -> None:
        """Log an appended album"""
        self.logger.info(
            "Album created",
            album_id=album_id,
            title=title,
            total=total,
            **kwargs
        )

    def log_album_missing(self, album_id: str) -> None:
        """Log a lookup for an unknown id"""
        self.logger.info("Album not found", album_id=album_id)

    def log_malformed_body(self, reason: str, size_bytes: int) -> None:
        """Log a rejected create request"""
        self.logger.warning(
            "Malformed request body",
            reason=reason,
            size_bytes=size_bytes
        )


store_logger = AlbumStoreLogger()

__all__ = [
    "setup_logging",
    "AlbumStoreLogger",
    "store_logger",
]
