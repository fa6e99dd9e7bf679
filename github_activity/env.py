from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 10
DEFAULT_LIMIT = 10


def load_dotenv_if_present(path: str | Path = ".env") -> None:
    """Pick up GITHUB_* and LOG_LEVEL overrides from ``path``; real env vars win."""
    env_file = Path(path)
    if env_file.is_file():
        load_dotenv(dotenv_path=env_file, override=False)


def configure_logging(default_level: str = "WARNING") -> None:
    """Configure root logging level from LOG_LEVEL env (default WARNING)."""
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level)


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: int = DEFAULT_TIMEOUT
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls) -> Settings:
        api_url = os.getenv("GITHUB_API_URL", "").strip() or DEFAULT_API_URL
        return cls(
            api_url=api_url.rstrip("/"),
            timeout=_positive_int("GITHUB_ACTIVITY_TIMEOUT", DEFAULT_TIMEOUT),
            limit=_positive_int("GITHUB_ACTIVITY_LIMIT", DEFAULT_LIMIT),
        )
