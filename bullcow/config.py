"""
Single place to:
- Load env vars from .env if present
- Read the game settings (log level, optional starting word length)
- Set up logging for the bullcow package

Word lists are fixed in schemas.DEFAULT_CATALOG and are not configurable.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .schemas import DEFAULT_CATALOG

# dev convenience; a real shell environment wins over .env
load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    app_env: str = "local"
    log_level: str = DEFAULT_LOG_LEVEL
    word_length: Optional[int] = None


def _parse_log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def _parse_word_length(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        length = int(raw)
    except ValueError:
        logger.warning("Ignoring BULLCOW_WORD_LENGTH=%r: not an integer", raw)
        return None
    if length not in DEFAULT_CATALOG.lengths:
        logger.warning(
            "Ignoring BULLCOW_WORD_LENGTH=%d: supported lengths are %s",
            length, list(DEFAULT_CATALOG.lengths),
        )
        return None
    return length


def load_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=_parse_log_level(os.getenv("BULLCOW_LOG_LEVEL")),
        word_length=_parse_word_length(os.getenv("BULLCOW_WORD_LENGTH")),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Attach one stderr handler to the package logger.
    Calling it again only changes the level.
    """
    package_logger = logging.getLogger("bullcow")
    package_logger.setLevel(_parse_log_level(level))

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
