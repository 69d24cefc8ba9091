"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Enable debug features")
    enable_export: bool = Field(default=True, description="Enable PDF/JSON export")

    # Export
    reports_dir: str = Field(default="reports", description="Directory for saved reports")

    # Market data cache
    rent_data_ttl_seconds: int = Field(default=10 * 60, ge=0)
    airbnb_data_ttl_seconds: int = Field(default=15 * 60, ge=0)
    cache_max_entries: int = Field(default=1000, ge=1)

    # Report footer
    company_name: str = Field(default="A&M Capital")
    company_address: str = Field(default="20 Rue Ampère, 91300 Massy")
    company_phone: str = Field(default="+33 1 42 86 83 85")
    company_email: str = Field(default="contact@am-capital.fr")

    model_config = {
        "env_prefix": "AMCAPITAL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
