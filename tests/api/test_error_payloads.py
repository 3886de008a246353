# This file tests how storage failures surface through the API.
# Only the email uniqueness violation reads as a conflict; any other failure is an opaque 500.

from __future__ import annotations

from dataclasses import replace

import pytest
from sqlalchemy.exc import IntegrityError

from customer_service.api.error_handlers import is_email_conflict
from customer_service.common.db import DatabaseClient
from customer_service.customers.models import Customer
from customer_service.customers.sql_dao import CustomerSqlDataAccess
from tests.api.support import api_test_client


class BlindEmailCheckDAO(CustomerSqlDataAccess):
    """SQL backend whose email check always misses, as in a registration race."""

    def exists_customer_with_email(self, email: str) -> bool:
        return False


class NullNameDAO(CustomerSqlDataAccess):
    """SQL backend that drops the name on insert, tripping the NOT NULL column."""

    def insert_customer(self, customer: Customer) -> None:
        super().insert_customer(replace(customer, name=None))


class BrokenDAO:
    def select_all_customers(self) -> list[Customer]:
        raise RuntimeError("connection reset by peer")


def test_unique_constraint_violation_is_reported_as_conflict(sqlite_db: DatabaseClient) -> None:
    dao = BlindEmailCheckDAO(db=sqlite_db)
    dao.insert_customer(Customer(name="Alex", email="alex@x.com", age=21))

    with api_test_client(customer_dao=dao) as client:
        response = client.post(
            "/api/v1/customers",
            json={"name": "Alex Two", "email": "alex@x.com", "age": 30},
        )

    assert response.status_code == 409
    assert response.json()["error_code"] == "DUPLICATE_RESOURCE"
    assert len(dao.select_all_customers()) == 1


def test_unexpected_storage_failure_returns_generic_500() -> None:
    with api_test_client(customer_dao=BrokenDAO(), raise_server_exceptions=False) as client:
        response = client.get("/api/v1/customers")

    assert response.status_code == 500
    payload = response.json()
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert "connection reset" not in payload["message"]


def test_other_integrity_errors_return_generic_500(sqlite_db: DatabaseClient) -> None:
    dao = NullNameDAO(db=sqlite_db)
    with api_test_client(customer_dao=dao, raise_server_exceptions=False) as client:
        response = client.post(
            "/api/v1/customers",
            json={"name": "Alex", "email": "alex@x.com", "age": 21},
        )

    assert response.status_code == 500
    payload = response.json()
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert "NOT NULL" not in payload["message"]
    assert dao.select_all_customers() == []


@pytest.mark.parametrize(
    ("driver_message", "expected"),
    [
        ('duplicate key value violates unique constraint "customer_email_unique"', True),
        ("UNIQUE constraint failed: customer.email", True),
        ('duplicate key value violates unique constraint "customer_pkey"', False),
        ("NOT NULL constraint failed: customer.name", False),
    ],
)
def test_is_email_conflict_matches_only_email_constraint(driver_message: str, expected: bool) -> None:
    exc = IntegrityError("INSERT INTO customer ...", {}, Exception(driver_message))

    assert is_email_conflict(exc) is expected
