"""
HTC Chamber Plan API Configuration
==================================
Environment-driven settings. Values are read once at application start;
a local .env file is honoured for development.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parent.parent

API_KEY_PLACEHOLDER = "YOUR_GOOGLE_API_KEY_HERE"
DEFAULT_MODEL_NAME = "gemini-1.5-flash-latest"
DEFAULT_MODEL_TIMEOUT = 60.0
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API server."""
    google_api_key: str = ""
    model_name: str = DEFAULT_MODEL_NAME
    model_timeout: float = DEFAULT_MODEL_TIMEOUT
    supplements_path: Path = PROJECT_ROOT / "data" / "supplements.json"
    static_dir: Path = PROJECT_ROOT / "static"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.google_api_key) and self.google_api_key != API_KEY_PLACEHOLDER


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if raw not in LOG_LEVELS:
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default
    return raw


def load_settings() -> Settings:
    """
    Build Settings from the process environment (after loading .env).

    Malformed numeric or log-level values are logged and replaced by their
    defaults so a typo in the environment cannot stop the server.
    """
    load_dotenv()

    return Settings(
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME),
        model_timeout=_env_number("GEMINI_TIMEOUT_SECONDS", DEFAULT_MODEL_TIMEOUT, float),
        supplements_path=Path(os.getenv("SUPPLEMENTS_PATH", str(PROJECT_ROOT / "data" / "supplements.json"))),
        static_dir=Path(os.getenv("STATIC_DIR", str(PROJECT_ROOT / "static"))),
        port=_env_number("PORT", DEFAULT_PORT, int),
        log_level=_env_log_level("LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
