"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DOTENV_PATH = PROJECT_ROOT / ".env"
DEFAULT_SQLITE_PATH = PROJECT_ROOT / "site_blocks.db"
LOG_FORMAT = "[%(levelname)s] %(message)s"

DEFAULT_SITE_NAME = "Site Blocks"
DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str | None = None
    sqlite_path: Path | None = None
    site_name: str = DEFAULT_SITE_NAME
    log_level: str = "INFO"
    history_limit: int = DEFAULT_HISTORY_LIMIT

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> Settings:
        database_url = env.get("DATABASE_URL") or None
        sqlite_path = env.get("SITE_BLOCKS_SQLITE_PATH") or None
        if database_url is None and sqlite_path is None:
            sqlite_path = DEFAULT_SQLITE_PATH
        return cls(
            database_url=database_url,
            sqlite_path=Path(sqlite_path) if sqlite_path else None,
            site_name=env.get("SITE_BLOCKS_SITE_NAME") or DEFAULT_SITE_NAME,
            log_level=(env.get("SITE_BLOCKS_LOG_LEVEL") or "INFO").upper(),
            history_limit=_positive_int(env.get("SITE_BLOCKS_HISTORY_LIMIT"), DEFAULT_HISTORY_LIMIT),
        )


def load_settings(dotenv_path: Path | None = DOTENV_PATH) -> Settings:
    """Read settings from the process environment after loading ``.env`` if present.

    Variables already set in the environment win over the file.
    """
    if dotenv_path is not None and dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)
    return Settings.from_env(os.environ)


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _positive_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer setting value %r", raw)
        return default
    return value if value > 0 else default


__all__ = ["DEFAULT_SQLITE_PATH", "DOTENV_PATH", "LOG_FORMAT", "Settings", "configure_logging", "load_settings"]
