# This file defines schema pieces reused by multiple API endpoints.
# The error payload model documents the body every exception handler returns.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
