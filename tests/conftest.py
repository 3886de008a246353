"""
Shared test configuration.
It seeds the environment the API reads at import time and provides a throwaway SQLite database.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

TEST_ENV_DEFAULTS = {
    "PROJECT_NAME": "test-project",
    "ENV": "test",
    "LOG_LEVEL": "INFO",
    "CUSTOMER_DATA_ACCESS": "memory",
    "CUSTOMER_AUTO_CREATE_SCHEMA": "false",
}

# The app module builds its config at import time, before any fixture runs.
for _key, _value in TEST_ENV_DEFAULTS.items():
    os.environ.setdefault(_key, _value)

from customer_service.common.db import DatabaseClient  # noqa: E402
from customer_service.customers.ddl import apply_customer_ddl  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    for key, value in TEST_ENV_DEFAULTS.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture()
def sqlite_db(tmp_path: Path) -> Iterator[DatabaseClient]:
    """File-backed SQLite database with the customer table created."""

    db = DatabaseClient(database_url=f"sqlite:///{tmp_path / 'customers.db'}")
    apply_customer_ddl(db.engine)
    try:
        yield db
    finally:
        db.dispose()
