"""
Customer entity, domain errors, and the interchangeable storage backends.
The API service depends on the `CustomerDAO` protocol; which backend is active is decided by configuration.
"""

from customer_service.customers.dao import CustomerDAO
from customer_service.customers.errors import (
    CustomerServiceError,
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from customer_service.customers.memory_dao import CustomerListDataAccess
from customer_service.customers.models import Customer, map_customer_row
from customer_service.customers.orm_dao import CustomerOrmDataAccess
from customer_service.customers.sql_dao import CustomerSqlDataAccess

__all__ = [
    "Customer",
    "CustomerDAO",
    "CustomerListDataAccess",
    "CustomerOrmDataAccess",
    "CustomerServiceError",
    "CustomerSqlDataAccess",
    "DuplicateResourceError",
    "RequestValidationError",
    "ResourceNotFoundError",
    "map_customer_row",
]
