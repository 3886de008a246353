"""Storage capability set shared by every customer backend."""

from __future__ import annotations

from typing import Protocol

from customer_service.customers.models import Customer


class CustomerDAO(Protocol):
    """Operations the customer service needs from a storage backend.

    Implementations must agree on semantics: `select_all_customers` returns
    records in id order, `insert_customer` ignores any id on the argument and
    lets the store assign one, and `update_customer` writes every field of the
    given record to the row with the same id. `update_customer` never creates a
    row: it returns False when no row has that id.
    """

    def select_all_customers(self) -> list[Customer]: ...

    def select_customer_by_id(self, customer_id: int) -> Customer | None: ...

    def insert_customer(self, customer: Customer) -> None: ...

    def exists_customer_with_email(self, email: str) -> bool: ...

    def exists_customer_with_id(self, customer_id: int) -> bool: ...

    def delete_customer_by_id(self, customer_id: int) -> None: ...

    def update_customer(self, customer: Customer) -> bool: ...
