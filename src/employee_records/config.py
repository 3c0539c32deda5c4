"""Configuration management for the employee record store."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

STORAGE_BACKENDS = ("file", "memory", "sql")

# Environment markers that indicate a read-only deployment bundle
SERVERLESS_MARKERS = ("VERCEL", "AWS_LAMBDA_FUNCTION_NAME")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    data_dir: Path
    storage_backend: str
    database_url: str
    host: str
    port: int
    debug: bool
    log_level: str

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(f"storage_backend must be one of {STORAGE_BACKENDS}")

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    @property
    def data_file(self) -> Path:
        """Path of the JSON document used by the file backend."""
        return self.data_dir / "storage.json"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        if any(os.getenv(marker) for marker in SERVERLESS_MARKERS):
            default_dir = "/tmp"
        else:
            default_dir = "./data"
        data_dir = Path(os.getenv("DATA_DIR", default_dir))

        return cls(
            data_dir=data_dir,
            storage_backend=os.getenv("STORAGE_BACKEND", "file").lower(),
            database_url=os.getenv("DATABASE_URL", f"sqlite:///{data_dir / 'storage.db'}"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
