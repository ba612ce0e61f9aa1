"""Application configuration and constants."""
import logging
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_log_level(name: str, default: int) -> int:
    """Parse logging level name (e.g. ``DEBUG``) from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Database
DB_DIR = Path(os.environ.get("DB_DIR", Path.cwd() / "data"))
DB_DIR.mkdir(parents=True, exist_ok=True)
DATABASE_URL = os.environ.get(
    "DATABASE_URL", f"sqlite:///{DB_DIR / 'quiz_admin.db'}"
)

# Logging
LOG_LEVEL = _parse_log_level("LOG_LEVEL", logging.INFO)

# Question options
MIN_OPTIONS = 2
MAX_OPTIONS = 6
OPTION_LABELS = ("A", "B", "C", "D", "E", "F")

# Content blocks
MIN_CONTENT_BLOCKS = 1
PREVIEW_LENGTH = _parse_int_env("PREVIEW_LENGTH", 100)

# Quizzes
QUIZ_DEFAULT_MARKS = 1
QUIZ_TYPES = ("pyq", "practice", "daily")
QUIZ_SCOPES = ("exam", "subject", "topic", "subtopic")
MIN_YEAR = 1900
