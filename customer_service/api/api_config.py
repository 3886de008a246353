# This file defines runtime settings for the API layer in one place.
# The config loader reads environment variables and applies defaults for local development.
# It validates the version path and the storage backend tag used to pick a customer DAO.

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DataAccessKind = Literal["sql", "orm", "memory"]


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Customer Service API"
    api_version_path: str = "/api/v1"
    schema_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "local"
    database_url: str | None = None
    customer_data_access: DataAccessKind = "sql"
    auto_create_schema: bool = True
    enable_request_logging: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    app_version: str = "0.1.0"

    @field_validator("api_version_path")
    @classmethod
    def validate_api_version_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_version_path must start with '/'.")
        parts = [part for part in value.split("/") if part]
        if len(parts) < 2 or parts[-1].startswith("v") is False:
            raise ValueError("api_version_path must look like '/api/v1'.")
        return value.rstrip("/")

    @field_validator("customer_data_access", mode="before")
    @classmethod
    def normalize_data_access(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    @model_validator(mode="after")
    def require_database_for_sql_backends(self) -> ApiConfig:
        if self.customer_data_access != "memory" and not self.database_url:
            raise ValueError(
                f"database_url is required when customer_data_access={self.customer_data_access!r}."
            )
        return self

    @property
    def uses_database(self) -> bool:
        return self.customer_data_access != "memory"

    def api_version_label(self) -> str:
        return self.api_version_path.rstrip("/").split("/")[-1]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Customer Service API"),
        "api_version_path": os.getenv("API_VERSION_PATH", "/api/v1"),
        "schema_version": os.getenv("API_SCHEMA_VERSION", "1.0.0"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8080),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL") or None,
        "customer_data_access": os.getenv("CUSTOMER_DATA_ACCESS", "sql"),
        "auto_create_schema": _env_bool("CUSTOMER_AUTO_CREATE_SCHEMA", True),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if str(config_values["customer_data_access"]).strip().lower() != "memory" and not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
