"""
Customer value type, its SQLAlchemy table mapping, and the row mapper.
The plain dataclass is what services and routers pass around; `CustomerRecord` only exists inside the ORM backend.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy import BigInteger, Column, Integer, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

CUSTOMER_TABLE = "customer"
EMAIL_UNIQUE_CONSTRAINT = "customer_email_unique"

# Ids are signed 64-bit in every store.
MIN_CUSTOMER_ID = -(2**63)
MAX_CUSTOMER_ID = 2**63 - 1

# SQLite only auto-assigns ids for an INTEGER PRIMARY KEY column.
CUSTOMER_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")

Base = declarative_base()


@dataclass
class Customer:
    """A customer record. `id` is None until the store assigns one."""

    name: str
    email: str
    age: int
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def map_customer_row(row: Mapping[str, Any]) -> Customer:
    """Map a result row with `id, name, email, age` keys to a `Customer`."""

    return Customer(
        id=int(row["id"]),
        name=str(row["name"]),
        email=str(row["email"]),
        age=int(row["age"]),
    )


class CustomerRecord(Base):
    __tablename__ = CUSTOMER_TABLE
    __table_args__ = (UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),)

    id = Column(CUSTOMER_ID_TYPE, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)

    def to_customer(self) -> Customer:
        return Customer(id=self.id, name=self.name, email=self.email, age=self.age)

    def __repr__(self) -> str:
        return f"CustomerRecord(id={self.id!r}, email={self.email!r})"
