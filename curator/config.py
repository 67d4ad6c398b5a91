from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    session_secret: str = os.getenv(
        "SESSION_SECRET", "capture-curator-secret-change-in-production"
    )
    catalog_path: Path | None = _env_path("CURATOR_CATALOG_PATH")
    catalog_seed: int = int(os.getenv("CURATOR_CATALOG_SEED", "2024"))
    catalog_size: int = int(os.getenv("CURATOR_CATALOG_SIZE", "120"))
    cache_ttl: float = float(os.getenv("CURATOR_CACHE_TTL", "300"))
    top_n: int = int(os.getenv("CURATOR_TOP_N", "12"))
    shortlist_preview: int = 9
    log_level: str = os.getenv("CURATOR_LOG_LEVEL", "INFO")


DEFAULT_SETTINGS = Settings()


def configure_logging(level: str = DEFAULT_SETTINGS.log_level) -> None:
    """Attach a single stream handler to the ``curator`` logger."""
    root_logger = logging.getLogger("curator")
    root_logger.setLevel(level.upper())

    if root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(handler)
