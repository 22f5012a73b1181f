"""Runtime configuration and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Default data directory (repository root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"
DB_FILENAME = "progress_pals.db"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Names accepted by both stdlib logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _load_repo_env() -> None:
    """Load the nearest .env starting from the working directory upward."""
    current = Path.cwd().resolve()
    for candidate in [current, *current.parents]:
        env_file = candidate / ".env"
        if env_file.exists():
            load_dotenv(env_file)
            return


_load_repo_env()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"

    @property
    def db_path(self) -> Path:
        return self.data_dir / DB_FILENAME


def load_settings() -> Settings:
    """Read settings from the environment.

    ``PROGRESS_PALS_DATA_DIR`` overrides where the database lives and
    ``PROGRESS_PALS_LOG_LEVEL`` sets the root log level.
    """
    data_dir = os.getenv("PROGRESS_PALS_DATA_DIR")
    log_level = os.getenv("PROGRESS_PALS_LOG_LEVEL", "WARNING").strip().upper()
    log_level = LOG_LEVEL_ALIASES.get(log_level, log_level)
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"PROGRESS_PALS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )
    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        log_level=log_level,
    )


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once for CLI and server processes."""
    if level is None:
        level = load_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
