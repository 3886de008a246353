"""In-memory customer backend used for local runs and tests that need no database."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from customer_service.customers.models import Customer


class CustomerListDataAccess:
    """`CustomerDAO` over an ordered list owned by the instance.

    Records are copied on the way in and out so callers cannot mutate stored
    state. Ids are assigned as one more than the largest id held.
    """

    def __init__(self, customers: Iterable[Customer] | None = None) -> None:
        seed = list(customers or ())
        self._customers: list[Customer] = sorted(
            (replace(customer) for customer in seed if customer.id is not None),
            key=lambda item: item.id,
        )
        # Unnumbered records are numbered after every explicit id is known.
        for customer in seed:
            if customer.id is None:
                self.insert_customer(customer)

    def select_all_customers(self) -> list[Customer]:
        return [replace(customer) for customer in self._customers]

    def select_customer_by_id(self, customer_id: int) -> Customer | None:
        index = self._index_of(customer_id)
        return replace(self._customers[index]) if index is not None else None

    def insert_customer(self, customer: Customer) -> None:
        self._customers.append(replace(customer, id=self._next_id()))

    def exists_customer_with_email(self, email: str) -> bool:
        return any(customer.email == email for customer in self._customers)

    def exists_customer_with_id(self, customer_id: int) -> bool:
        return self._index_of(customer_id) is not None

    def delete_customer_by_id(self, customer_id: int) -> None:
        index = self._index_of(customer_id)
        if index is not None:
            del self._customers[index]

    def update_customer(self, customer: Customer) -> bool:
        if customer.id is None:
            raise ValueError("Cannot update a customer without an id.")

        index = self._index_of(customer.id)
        if index is None:
            return False
        self._customers[index] = replace(customer)
        return True

    def _index_of(self, customer_id: int) -> int | None:
        for index, customer in enumerate(self._customers):
            if customer.id == customer_id:
                return index
        return None

    def _next_id(self) -> int:
        return max((customer.id or 0 for customer in self._customers), default=0) + 1
