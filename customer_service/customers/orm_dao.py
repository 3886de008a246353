"""Customer backend built on SQLAlchemy ORM sessions over `CustomerRecord`."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.orm import Session, sessionmaker

from customer_service.customers.models import Customer, CustomerRecord


class CustomerOrmDataAccess:
    """ORM implementation of `CustomerDAO`.

    Each call opens a short-lived session; writes run inside `sessionmaker.begin()`
    so they commit on success and roll back on error.
    """

    def __init__(self, *, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def select_all_customers(self) -> list[Customer]:
        with self._session_factory() as session:
            records = session.scalars(select(CustomerRecord).order_by(CustomerRecord.id)).all()
            return [record.to_customer() for record in records]

    def select_customer_by_id(self, customer_id: int) -> Customer | None:
        with self._session_factory() as session:
            record = session.get(CustomerRecord, customer_id)
            return record.to_customer() if record is not None else None

    def insert_customer(self, customer: Customer) -> None:
        record = CustomerRecord(name=customer.name, email=customer.email, age=customer.age)
        with self._session_factory.begin() as session:
            session.add(record)

    def exists_customer_with_email(self, email: str) -> bool:
        with self._session_factory() as session:
            return bool(session.scalar(select(exists().where(CustomerRecord.email == email))))

    def exists_customer_with_id(self, customer_id: int) -> bool:
        with self._session_factory() as session:
            return bool(session.scalar(select(exists().where(CustomerRecord.id == customer_id))))

    def delete_customer_by_id(self, customer_id: int) -> None:
        with self._session_factory.begin() as session:
            record = session.get(CustomerRecord, customer_id)
            if record is not None:
                session.delete(record)

    def update_customer(self, customer: Customer) -> bool:
        if customer.id is None:
            raise ValueError("Cannot update a customer without an id.")

        with self._session_factory.begin() as session:
            record = session.get(CustomerRecord, customer.id)
            if record is None:
                return False
            record.name = customer.name
            record.email = customer.email
            record.age = customer.age
            return True
