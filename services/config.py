"""Configuration helpers for the school directory client."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent

# Make values from an optional project ``.env`` visible before settings are read.
load_dotenv(ROOT_DIR / ".env")

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    request_timeout: float
    log_level: str


def _read_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid SCHOOLS_API_TIMEOUT '%s', using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("SCHOOLS_API_TIMEOUT must be positive, got %s; using %s", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def get_settings() -> Settings:
    """Return settings read from the environment (re-read on every call)."""
    base_url = (os.environ.get("SCHOOLS_API_URL") or DEFAULT_API_URL).strip().rstrip("/")
    return Settings(
        api_base_url=base_url or DEFAULT_API_URL,
        request_timeout=_read_timeout(os.environ.get("SCHOOLS_API_TIMEOUT")),
        log_level=(os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
