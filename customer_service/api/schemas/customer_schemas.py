# This file defines request and response contracts for the customer resource.
# Registration requires every field; updates treat each field as optional.
# A field left out of an update body, or sent as null, means "leave unchanged".

from __future__ import annotations

from pydantic import BaseModel, Field


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: str
    age: int


class CustomerRegistrationRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    age: int


class CustomerUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    age: int | None = None
