"""
Runtime configuration from environment variables (and an optional .env file).

    TOURNAMENTS_FILE  JSON array of tournament records; unset uses demo data
    CORS_ORIGINS      extra comma-separated origins for the frontend
    LOG_LEVEL         root log level, default INFO
    STRICT_INGEST     "true" makes one bad record fail startup
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]

_TRUTHY = ("true", "1", "yes")


@dataclass
class Settings:
    tournaments_file: Optional[Path] = None
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    strict_ingest: bool = False


def get_settings() -> Settings:
    """Read settings from the current environment."""
    tournaments_file = os.getenv("TOURNAMENTS_FILE", "").strip()

    cors_origins = list(DEFAULT_CORS_ORIGINS)
    extra = os.getenv("CORS_ORIGINS", "")
    if extra:
        cors_origins.extend(o.strip() for o in extra.split(",") if o.strip())

    return Settings(
        tournaments_file=Path(tournaments_file).expanduser() if tournaments_file else None,
        cors_origins=cors_origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        strict_ingest=os.getenv("STRICT_INGEST", "false").lower() in _TRUTHY,
    )
