"""
User Response DTOs

DTOs for user-related API responses. Passwords are never part of them.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from dtos.base import CamelModel
from dtos.response.payment_response import PaymentResponseDto


class UserResponseDto(CamelModel):
    """
    Response DTO for user information.

    payments is only filled when the caller asks for it
    (GET /api/users/{id}?includePayments=true).
    """

    id: UUID = Field(description="User ID")
    name: str = Field(description="Display name")
    login: str = Field(description="Login")
    email: str = Field(description="Email address")
    role: str = Field(description="Role")
    archive_date: Optional[datetime] = Field(None, description="Archive timestamp, null while active")
    payments: List[PaymentResponseDto] = Field(default_factory=list, description="Payments of the user")
