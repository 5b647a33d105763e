"""
config.py - SalaryTax application settings.

Usage:
    from salarytax.config import settings
    print(settings.default_regime)

Tax constants are NOT settings - they live in salarytax.engine.rules.
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from salarytax.engine.schemas import Regime


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore any extra env vars
    )

    # --- Engine defaults ---
    # Regime used by POST /api/calculate when the request omits one
    default_regime: Regime = Regime.new

    # --- CORS ---
    # Comma-separated list of allowed frontend origins
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # --- Application ---
    debug: bool = False
    app_version: str = "0.1.0"

    @property
    def cors_origins_list(self) -> List[str]:
        """Split comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Module-level singleton - import this throughout the codebase
settings = Settings()
