# This file provides dependency factories for FastAPI routes and startup hooks.
# The database client, the customer backend, and the customer service are built once per process.
# Tests replace any of them through `app.dependency_overrides`.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from customer_service.api.api_config import ApiConfig, get_api_config
from customer_service.api.services.customer_service import CustomerService
from customer_service.common.db import DatabaseClient
from customer_service.customers.dao import CustomerDAO
from customer_service.customers.memory_dao import CustomerListDataAccess
from customer_service.customers.orm_dao import CustomerOrmDataAccess
from customer_service.customers.sql_dao import CustomerSqlDataAccess


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    if not config.database_url:
        raise RuntimeError("DATABASE_URL is not configured.")
    return DatabaseClient(database_url=config.database_url)


def build_customer_dao(config: ApiConfig, db: DatabaseClient | None = None) -> CustomerDAO:
    """Pick the customer backend named by `config.customer_data_access`."""

    if config.customer_data_access == "memory":
        return CustomerListDataAccess()

    db_client = db or get_database_client()
    if config.customer_data_access == "orm":
        return CustomerOrmDataAccess(session_factory=db_client.session_factory)
    return CustomerSqlDataAccess(db=db_client)


@lru_cache(maxsize=1)
def get_customer_dao() -> CustomerDAO:
    return build_customer_dao(get_api_config())


@lru_cache(maxsize=1)
def get_customer_service() -> CustomerService:
    return CustomerService(dao=get_customer_dao())


def get_config() -> ApiConfig:
    return get_api_config()


def get_optional_database_client(
    config: Annotated[ApiConfig, Depends(get_config)],
) -> DatabaseClient | None:
    if not config.uses_database:
        return None
    return get_database_client()
