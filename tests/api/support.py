# This file provides shared helpers for API endpoint tests.
# Tests override the customer service and database dependencies without touching real databases.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from customer_service.api.api_config import ApiConfig
from customer_service.api.app import app
from customer_service.api.dependencies import (
    get_config,
    get_customer_service,
    get_database_client,
    get_optional_database_client,
)
from customer_service.api.services.customer_service import CustomerService
from customer_service.customers.dao import CustomerDAO
from customer_service.customers.memory_dao import CustomerListDataAccess


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Customer API",
        "api_version_path": "/api/v1",
        "schema_version": "1.0.0",
        "host": "0.0.0.0",
        "port": 8080,
        "environment": "test",
        "database_url": None,
        "customer_data_access": "memory",
        "auto_create_schema": False,
        "enable_request_logging": False,
        "allowed_origins": [],
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


class FakeDBClient:
    """Simple fake DB dependency for readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {"customer"}

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    customer_dao: CustomerDAO | None = None,
    customer_service: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides.

    Unless a service is given, every client gets a fresh service over
    `customer_dao` (or an empty in-memory backend), so tests never share state.
    """

    resolved_config = config or build_test_config()
    resolved_service = customer_service or CustomerService(dao=customer_dao or CustomerListDataAccess())

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_customer_service] = lambda: resolved_service
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
        app.dependency_overrides[get_optional_database_client] = lambda: db_client

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
