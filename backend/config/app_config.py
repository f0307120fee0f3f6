"""
Application Configuration

Environment-driven settings for the order backend.
Values are read once at import time; restart the process to pick up changes.

Includes:
- Database location
- Log directory and level
- CORS origins
- Server host/port for the uvicorn entry point
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def _env_list(name: str, default: str) -> list[str]:
    """Read a comma-separated list from the environment."""
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


APP_NAME = "democrud"
APP_VERSION = "1.0.0"

# Data directory used by the default SQLite database and log files
DATA_DIR = Path(os.environ.get('DEMOCRUD_DATA_DIR', Path.home() / ".democrud"))

DATABASE_URL = os.environ.get('DATABASE_URL', f"sqlite:///{DATA_DIR / 'democrud.db'}")
SQL_ECHO = _env_flag('SQL_ECHO')

LOG_DIR = Path(os.environ.get('LOG_DIR', DATA_DIR / "logs"))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

CORS_ORIGINS = _env_list('CORS_ORIGINS', '*')

APP_HOST = os.environ.get('APP_HOST', '127.0.0.1')
APP_PORT = int(os.environ.get('APP_PORT', '8080'))


def is_sqlite(url: str = DATABASE_URL) -> bool:
    """Check whether the configured database is SQLite."""
    return url.startswith('sqlite')
