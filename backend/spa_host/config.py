"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the server runs with zero configuration
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults bind 0.0.0.0:10001 and serve dist/ with dist/index.html fallback

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SPA_HOST_ prefix: avoids picking up generic PORT/HOST from the platform
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPA_HOST_", env_file=".env", case_sensitive=False,
    )

    # Listener
    host: str = "0.0.0.0"
    port: int = 10001

    # Static assets (pre-built, owned by the frontend build)
    static_dir: Path = Path("dist")
    fallback_document: str = "index.html"

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("port")
    @classmethod
    def check_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"port must be in 1..65535, got {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def fallback_path(self) -> Path:
        """SPA entry document served for every unmatched path."""
        return self.static_dir / self.fallback_document

    @property
    def listen_url(self) -> str:
        """Address announced in the startup log line."""
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
