# app/config/settings.py

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,http://127.0.0.1:5173,"
    "http://localhost:5174,http://127.0.0.1:5174"
)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "voting-audit-service"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./audit.db"

    # --- HTTP ---
    cors_allowed_origins: str = DEFAULT_CORS_ORIGINS
    cors_allowed_origin_regex: str = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"
    trust_proxies: bool = True
    force_https: bool = False

    # --- Audit log listing ---
    audit_logs_default_per_page: int = Field(default=50, ge=1)
    audit_logs_max_per_page: int = Field(default=100, ge=1)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        """Comma-separated allow-list, trimmed, empty entries dropped."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def https_required(self) -> bool:
        return self.environment == "prod" or self.force_https


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
