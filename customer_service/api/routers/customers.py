# This file defines the customer resource endpoints under the versioned API path.
# Routers stay thin: they translate HTTP bodies into service calls and service records into JSON.
# Domain errors raised by the service are turned into responses by the registered exception handlers.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Response

from customer_service.api.dependencies import get_customer_service
from customer_service.api.schemas.common import ErrorResponse
from customer_service.api.schemas.customer_schemas import (
    CustomerRegistrationRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from customer_service.api.services.customer_service import CustomerService
from customer_service.customers.models import MAX_CUSTOMER_ID, MIN_CUSTOMER_ID

router = APIRouter(prefix="/customers", tags=["customers"])
CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
# Ids outside the 64-bit range are rejected before reaching storage.
CustomerIdPath = Annotated[int, Path(ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID)]

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Customer id does not exist."}
}
CONFLICT_RESPONSE: dict[int | str, dict[str, Any]] = {
    409: {"model": ErrorResponse, "description": "Email already taken."}
}
NO_CHANGES_RESPONSE: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Update contains no effective change."}
}


@router.get("", response_model=list[CustomerResponse])
def get_customers(service: CustomerServiceDep) -> list[dict[str, object]]:
    return [customer.to_dict() for customer in service.get_all_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse, responses=NOT_FOUND_RESPONSE)
def get_customer(customer_id: CustomerIdPath, service: CustomerServiceDep) -> dict[str, object]:
    return service.get_customer(customer_id).to_dict()


@router.post("", responses=CONFLICT_RESPONSE)
def register_customer(payload: CustomerRegistrationRequest, service: CustomerServiceDep) -> Response:
    service.add_customer(payload)
    return Response(status_code=200)


@router.put(
    "/{customer_id}",
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE, **NO_CHANGES_RESPONSE},
)
def update_customer(
    customer_id: CustomerIdPath,
    payload: CustomerUpdateRequest,
    service: CustomerServiceDep,
) -> Response:
    service.update_customer(customer_id, payload)
    return Response(status_code=200)


@router.delete("/{customer_id}", responses=NOT_FOUND_RESPONSE)
def delete_customer(customer_id: CustomerIdPath, service: CustomerServiceDep) -> Response:
    service.delete_customer_by_id(customer_id)
    return Response(status_code=200)
