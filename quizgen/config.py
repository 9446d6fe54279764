"""Settings from the environment (.env supported)."""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CSV_SOURCE = str(Path(__file__).resolve().parent.parent / "data" / "training.csv")
DEFAULT_QUESTIONS_PER_CATEGORY = 5
DEFAULT_HTTP_TIMEOUT = 15


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer; using {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={value} is below {minimum}; using {default}")
        return default
    return value


def _level_env(name: str, default: str = "INFO") -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    # getLevelName maps known names to ints and returns "Level X" otherwise
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"{name}={raw!r} is not a logging level; using {default}")
        return default
    return level


CSV_SOURCE = os.getenv("QUIZ_CSV_SOURCE", DEFAULT_CSV_SOURCE)
QUESTIONS_PER_CATEGORY = _int_env("QUIZ_QUESTIONS_PER_CATEGORY", DEFAULT_QUESTIONS_PER_CATEGORY)
HTTP_TIMEOUT = _int_env("QUIZ_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
LOG_LEVEL = _level_env("QUIZ_LOG_LEVEL")
