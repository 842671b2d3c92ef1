# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PLACEHOLDER_SECRETS = ("dev", "development", "test", "changeme", "change-me")


class SecurityConfig(BaseSettings):
    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(100, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(15 * 60.0, ge=0.1, alias="RL_WINDOW")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    # Honour X-Forwarded-For from one reverse proxy in front of the app
    trust_proxy: bool = Field(False, alias="TRUST_PROXY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("enable_rate_limit", "enable_hsts", "trust_proxy", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str | None = Field(None, alias="SECRET_KEY")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(5000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    # werkzeug method string; the numeric parts are the work factor
    password_hash_method: str = Field("scrypt:32768:8:1", alias="PASSWORD_HASH_METHOD")
    max_content_length: int = Field(100 * 1024, ge=1, alias="MAX_CONTENT_LENGTH")

    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _validate_secret_key(self) -> "AppConfig":
        if not self.secret_key:
            print(
                "\n❌ CRITICAL CONFIGURATION ERROR: SECRET_KEY is not set!\n"
                "   Tokens cannot be signed without it, refusing to start.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if not self.is_production():
            return self

        if self.secret_key.lower() in _PLACEHOLDER_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY must be a strong random value in production.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if not self.security.enable_hsts:
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: HSTS is DISABLED (recommended for HTTPS)\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "SecurityConfig", "load_config"]
