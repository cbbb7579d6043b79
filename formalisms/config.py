"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - log_format is always "json" or "text" after validation

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for local harness runs
    - Core modules never read settings: operation semantics cannot vary by environment
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        v = str(v).strip().lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    max_request_args: int = 8  # request-size guard, checked before argument kinds

    # Conformance
    conformance_fail_fast: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
