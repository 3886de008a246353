"""
Database access wrapper shared by the SQL and ORM customer backends.
It owns one SQLAlchemy engine and session factory per process and runs parameterized statements.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        self._engine: Engine = create_engine(database_url, pool_pre_ping=True, future=True)
        self._session_factory: sessionmaker[Session] = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        return self._session_factory

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        validate_identifier(table_name)
        return inspect(self._engine).has_table(table_name)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: str, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(text(query), dict(params or {})).scalar_one()

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement in its own transaction and return the affected row count."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
        return result.rowcount

    def dispose(self) -> None:
        self._engine.dispose()


def validate_identifier(identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier):
        raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
    return identifier
