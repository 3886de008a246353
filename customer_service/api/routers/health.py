# This file defines liveness, readiness, and version endpoints for API operations.
# The readiness check confirms database connectivity and that the customer table exists.
# With the in-memory backend there is no database, so readiness only reports the backend.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from customer_service.api.api_config import ApiConfig
from customer_service.api.dependencies import get_config, get_optional_database_client
from customer_service.api.schemas.health_schemas import (
    HealthResponse,
    ReadinessResponse,
    VersionResponse,
)
from customer_service.common.db import DatabaseClient
from customer_service.common.settings import Settings, get_settings
from customer_service.customers.models import CUSTOMER_TABLE

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
OptionalDBDep = Annotated[DatabaseClient | None, Depends(get_optional_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _version_fields(config: ApiConfig) -> dict[str, str]:
    return {
        "api_version": config.api_version_label(),
        "schema_version": config.schema_version,
    }


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    db: OptionalDBDep,
) -> dict[str, object]:
    if db is None:
        db_connected = None
        customer_table_ready = True
        database = "not_required"
    else:
        db_connected = db.can_connect()
        customer_table_ready = db_connected and db.table_exists(CUSTOMER_TABLE)
        database = "reachable" if db_connected else "unreachable"

    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "storage_backend": config.customer_data_access,
        "db_connected": db_connected,
        "customer_table_ready": customer_table_ready,
        "ready": customer_table_ready and db_connected is not False,
        "database": database,
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
    settings: SettingsDep,
) -> dict[str, object]:
    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "api_version_path": config.api_version_path,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": settings.PROJECT_NAME,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
