"""Settings from environment variables (optionally via a .env file) and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/addressbook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATA_FILE = "addressbook.txt"


@dataclass(frozen=True)
class Settings:
    data_file: Path = Path(DEFAULT_DATA_FILE)
    encoding: str = "utf-8"
    phone_region: str | None = None
    log_level: str = "INFO"


def load_env_file() -> Path | None:
    """Load .env from repo root or current dir (first found). Existing env vars win."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(*, use_env_file: bool = True) -> Settings:
    if use_env_file:
        load_env_file()
    data_file = os.environ.get("ADDRESSBOOK_FILE", "").strip() or DEFAULT_DATA_FILE
    encoding = os.environ.get("ADDRESSBOOK_ENCODING", "").strip() or "utf-8"
    region = os.environ.get("ADDRESSBOOK_PHONE_REGION", "").strip().upper() or None
    log_level = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"
    return Settings(
        data_file=Path(data_file).expanduser(),
        encoding=encoding,
        phone_region=region,
        log_level=log_level,
    )


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=level)
