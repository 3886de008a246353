"""DDL helper for the customer table."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from customer_service.customers.models import CUSTOMER_TABLE, Base

LOGGER = logging.getLogger("customers")


def apply_customer_ddl(engine: Engine) -> None:
    """Create the customer table and its email unique constraint if missing."""

    Base.metadata.create_all(bind=engine, checkfirst=True)
    LOGGER.info("customer schema ensured table=%s dialect=%s", CUSTOMER_TABLE, engine.dialect.name)
