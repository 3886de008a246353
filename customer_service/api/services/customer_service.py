# This file implements the customer registration, lookup, update, and deletion rules.
# Every guard (email uniqueness, id existence, effective change) runs here before storage is touched.
# The storage backend arrives through the `CustomerDAO` protocol, so the rules are the same for every backend.

from __future__ import annotations

import logging
from dataclasses import replace

from customer_service.api.schemas.customer_schemas import (
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)
from customer_service.customers.dao import CustomerDAO
from customer_service.customers.errors import (
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from customer_service.customers.models import Customer

LOGGER = logging.getLogger("customers")

EMAIL_TAKEN_MESSAGE = "email already taken"
NO_CHANGES_MESSAGE = "no data changes found"


def apply_customer_update(current: Customer, update: CustomerUpdateRequest) -> tuple[Customer, bool]:
    """Merge supplied fields that differ from `current`.

    Returns the merged record and whether any field actually changed. Fields
    that are missing or equal to the stored value are left as they are.
    """

    merged = replace(current)
    changed = False

    if update.name is not None and update.name != current.name:
        merged.name = update.name
        changed = True

    if update.age is not None and update.age != current.age:
        merged.age = update.age
        changed = True

    if update.email is not None and update.email != current.email:
        merged.email = update.email
        changed = True

    return merged, changed


class CustomerService:
    """Customer use cases on top of a storage backend."""

    def __init__(self, *, dao: CustomerDAO) -> None:
        self.dao = dao

    def get_all_customers(self) -> list[Customer]:
        return self.dao.select_all_customers()

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.dao.select_customer_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundError(_not_found_message(customer_id))
        return customer

    def add_customer(self, request: CustomerRegistrationRequest) -> None:
        if self.dao.exists_customer_with_email(request.email):
            LOGGER.warning("customer registration rejected: email already taken")
            raise DuplicateResourceError(EMAIL_TAKEN_MESSAGE)

        self.dao.insert_customer(Customer(name=request.name, email=request.email, age=request.age))
        LOGGER.info("customer registered")

    def delete_customer_by_id(self, customer_id: int) -> None:
        if not self.dao.exists_customer_with_id(customer_id):
            raise ResourceNotFoundError(_not_found_message(customer_id))

        self.dao.delete_customer_by_id(customer_id)
        LOGGER.info("customer deleted customer_id=%s", customer_id)

    def update_customer(self, customer_id: int, request: CustomerUpdateRequest) -> None:
        current = self.get_customer(customer_id)
        merged, changed = apply_customer_update(current, request)

        # Only reached for an email that differs from this record's own, so a
        # hit here always belongs to another customer.
        if merged.email != current.email and self.dao.exists_customer_with_email(merged.email):
            LOGGER.warning("customer update rejected customer_id=%s: email already taken", customer_id)
            raise DuplicateResourceError(EMAIL_TAKEN_MESSAGE)

        if not changed:
            raise RequestValidationError(NO_CHANGES_MESSAGE)

        if not self.dao.update_customer(merged):
            # Deleted after it was loaded above.
            raise ResourceNotFoundError(_not_found_message(customer_id))
        LOGGER.info("customer updated customer_id=%s", customer_id)


def _not_found_message(customer_id: int) -> str:
    return f"Customer with id [{customer_id}] not found"
