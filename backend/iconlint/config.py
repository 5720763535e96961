"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Icon contract
    canvas_size: float = 24.0
    float_precision: int = 3
    max_float_precision: int = 5
    center_tolerance: float = 0.001

    # Known-issues ledger. ICONLINT_UPDATE_IGNORE=true rebuilds it from scratch.
    ledger_path: str = ".iconlint-ignored.json"
    ledger_required: bool = False
    update_ignore: bool = False

    # Icon metadata catalog (read-only title lookup)
    catalog_path: str = "_data/simple-icons.json"

    max_workers: int = 8

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_prefix="ICONLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
