"""
Customer backend built on parameterized SQL through `DatabaseClient`.
Rows come back as mappings and go through `map_customer_row`; no ORM objects are involved.
"""

from __future__ import annotations

from customer_service.common.db import DatabaseClient
from customer_service.customers.models import CUSTOMER_TABLE, Customer, map_customer_row


class CustomerSqlDataAccess:
    """Raw-row implementation of `CustomerDAO`."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db
        self.table = CUSTOMER_TABLE

    def select_all_customers(self) -> list[Customer]:
        query = f"""
        SELECT id, name, email, age
        FROM {self.table}
        ORDER BY id ASC
        """
        return [map_customer_row(row) for row in self.db.fetch_all(query)]

    def select_customer_by_id(self, customer_id: int) -> Customer | None:
        query = f"""
        SELECT id, name, email, age
        FROM {self.table}
        WHERE id = :customer_id
        """
        row = self.db.fetch_one(query, {"customer_id": customer_id})
        return map_customer_row(row) if row is not None else None

    def insert_customer(self, customer: Customer) -> None:
        query = f"""
        INSERT INTO {self.table} (name, email, age)
        VALUES (:name, :email, :age)
        """
        self.db.execute(query, {"name": customer.name, "email": customer.email, "age": customer.age})

    def exists_customer_with_email(self, email: str) -> bool:
        query = f"SELECT COUNT(id) FROM {self.table} WHERE email = :email"
        return int(self.db.fetch_scalar(query, {"email": email})) > 0

    def exists_customer_with_id(self, customer_id: int) -> bool:
        query = f"SELECT COUNT(id) FROM {self.table} WHERE id = :customer_id"
        return int(self.db.fetch_scalar(query, {"customer_id": customer_id})) > 0

    def delete_customer_by_id(self, customer_id: int) -> None:
        self.db.execute(f"DELETE FROM {self.table} WHERE id = :customer_id", {"customer_id": customer_id})

    def update_customer(self, customer: Customer) -> bool:
        if customer.id is None:
            raise ValueError("Cannot update a customer without an id.")

        query = f"""
        UPDATE {self.table}
        SET name = :name, email = :email, age = :age
        WHERE id = :customer_id
        """
        updated = self.db.execute(
            query,
            {
                "customer_id": customer.id,
                "name": customer.name,
                "email": customer.email,
                "age": customer.age,
            },
        )
        return updated > 0
