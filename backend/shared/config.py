"""
Centralized configuration for the Warden account authority.

All settings are loaded from environment variables with sensible defaults.
Collaborator settings are namespaced (e.g., SUPABASE_*, TENANT_GATEWAY_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Warden"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # Supabase (credential store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py only

    # Tenant directory service
    tenant_gateway_url: str = ""
    tenant_gateway_api_key: str = ""
    tenant_gateway_timeout: float = 30.0  # seconds

    # Credentials
    password_hash_rounds: int = 10
    temporary_credential_ttl_minutes: int = 10

    # Tenant terms
    default_tenant_term: str = "2 weeks"
    tenant_notice_days: int = 7


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
