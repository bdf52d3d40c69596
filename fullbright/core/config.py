"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

TokenScheme = Literal["plain", "hash", "stored", "signed"]


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Postgres connection string; no default, the process refuses to start without it.
    DATABASE_URL: str

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Admin panel gate. When enabled, ?pass= or x-admin-pass must equal ADMIN_PASSWORD.
    ADMIN_AUTH_ENABLED: bool = True
    ADMIN_PASSWORD: SecretStr | None = None

    # Login / registration policy
    REQUIRE_HWID: bool = True
    ENFORCE_HWID_BINDING: bool = True
    AUTO_REGISTER_ON_LOGIN: bool = False
    DEFAULT_ROLE: str = "USER"

    # Token issuing
    TOKEN_SCHEME: TokenScheme = "hash"
    TOKEN_PREFIX: str = "demo-token-"
    TOKEN_SECRET: SecretStr | None = None

    # Behind a reverse proxy, take the client address from X-Forwarded-For.
    TRUST_PROXY_HEADERS: bool = False

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL (e.g. postgresql:// or postgresql+psycopg2://)"
            )
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("DEFAULT_ROLE")
    @classmethod
    def validate_default_role(cls, v: str) -> str:
        if not v or not v.strip() or len(v.strip()) > 32:
            raise ValueError("DEFAULT_ROLE must be 1-32 characters")
        return v.strip()

    @field_validator("TOKEN_PREFIX")
    @classmethod
    def validate_token_prefix(cls, v: str) -> str:
        if len(v) > 64:
            raise ValueError("TOKEN_PREFIX must be at most 64 characters")
        return v

    @model_validator(mode="after")
    def validate_secrets(self) -> "Settings":
        if self.ADMIN_AUTH_ENABLED:
            if self.ADMIN_PASSWORD is None or not self.ADMIN_PASSWORD.get_secret_value():
                raise ValueError(
                    "ADMIN_PASSWORD must be set when ADMIN_AUTH_ENABLED is true"
                )
        if self.TOKEN_SCHEME == "signed":
            if self.TOKEN_SECRET is None or not self.TOKEN_SECRET.get_secret_value().strip():
                raise ValueError("TOKEN_SECRET must be set when TOKEN_SCHEME is 'signed'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
