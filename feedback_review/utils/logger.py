"""
Clean logging configuration - minimal console output, warnings/errors to file.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pythonjsonlogger import jsonlogger


def setup_logging(settings) -> logging.Logger:
    """Setup clean console + file logging."""

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = []
    file_error = None
    level = getattr(logging, settings.LOG_LEVEL.upper())

    # Console handler - clean format (no timestamp/name)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    handlers.append(console_handler)

    # File handler - warnings/errors only, one JSON object per line
    if settings.LOG_TO_FILE:
        try:
            log_path = Path(settings.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
            )
            file_handler.setFormatter(jsonlogger.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            ))
            file_handler.setLevel(logging.WARNING)
            handlers.append(file_handler)
        except OSError as e:
            file_error = e  # Continue without file logging

    logging.basicConfig(level=level, handlers=handlers, force=True)

    if file_error is not None:
        logging.getLogger("feedback_review").warning(f"File logging disabled: {file_error}")

    # Silence third-party loggers
    for lib in ["pymongo", "motor", "uvicorn.access", "httpx"]:
        logging.getLogger(lib).setLevel(logging.WARNING)

    return logging.getLogger("feedback_review")


def get_logger(name: str) -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
