"""
Logging Utilities

Configures the root logger once at startup: a rotating log file plus stdout.
Modules then use ``logging.getLogger(__name__)`` as usual.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "backend.log"

_configured = False


def configure_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> Optional[Path]:
    """
    Configure root logging handlers.

    Safe to call more than once; only the first call installs handlers.

    Args:
        log_dir: Directory for the rotating log file, or None for stdout only
        level: Log level name (e.g., "INFO", "DEBUG")

    Returns:
        Path of the log file, or None if file logging is disabled
    """
    global _configured
    if _configured:
        return None

    log_level = getattr(logging, level.upper(), logging.INFO)
    log_formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    _configured = True
    return log_file
