"""
Unit tests for the in-memory customer backend.
It asserts id assignment, copy-on-read isolation, and in-place updates.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from customer_service.customers.memory_dao import CustomerListDataAccess
from customer_service.customers.models import Customer


def test_insert_assigns_next_id_ignoring_caller_id() -> None:
    dao = CustomerListDataAccess([Customer(id=5, name="Alex", email="alex@x.com", age=21)])
    dao.insert_customer(Customer(id=1, name="Jamila", email="jamila@x.com", age=19))

    assert [c.id for c in dao.select_all_customers()] == [5, 6]


def test_seed_without_ids_gets_sequential_ids() -> None:
    dao = CustomerListDataAccess(
        [
            Customer(name="Alex", email="alex@x.com", age=21),
            Customer(name="Jamila", email="jamila@x.com", age=19),
        ]
    )

    assert [(c.id, c.name) for c in dao.select_all_customers()] == [(1, "Alex"), (2, "Jamila")]


def test_instances_do_not_share_state() -> None:
    first = CustomerListDataAccess()
    second = CustomerListDataAccess()
    first.insert_customer(Customer(name="Alex", email="alex@x.com", age=21))

    assert second.select_all_customers() == []


def test_returned_records_are_copies() -> None:
    dao = CustomerListDataAccess([Customer(id=1, name="Alex", email="alex@x.com", age=21)])
    fetched = dao.select_customer_by_id(1)
    fetched.name = "Mutated"

    assert dao.select_customer_by_id(1).name == "Alex"


def test_update_replaces_record_in_place() -> None:
    dao = CustomerListDataAccess(
        [
            Customer(id=1, name="Alex", email="alex@x.com", age=21),
            Customer(id=2, name="Jamila", email="jamila@x.com", age=19),
        ]
    )
    dao.update_customer(Customer(id=1, name="Alex", email="alex@x.com", age=22))

    assert dao.select_all_customers() == [
        Customer(id=1, name="Alex", email="alex@x.com", age=22),
        Customer(id=2, name="Jamila", email="jamila@x.com", age=19),
    ]


def test_exists_and_delete() -> None:
    dao = CustomerListDataAccess([Customer(id=1, name="Alex", email="alex@x.com", age=21)])

    assert dao.exists_customer_with_email("alex@x.com") is True
    assert dao.exists_customer_with_email("Alex@x.com") is False
    assert dao.exists_customer_with_id(1) is True

    dao.delete_customer_by_id(1)
    dao.delete_customer_by_id(1)

    assert dao.exists_customer_with_id(1) is False
    assert dao.select_customer_by_id(1) is None
