"""
Payment Response DTOs

DTOs for payment-related API responses.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from dtos.base import CamelModel, Money
from dtos.response.good_response import GoodResponseDto


class PaymentResponseDto(CamelModel):
    """Response DTO for payment information, with its goods nested."""

    id: int = Field(description="Payment ID")
    user_id: Optional[UUID] = Field(None, description="Owning user ID, null once the user is archived")
    total_purchase_amount: Money = Field(description="Total amount")
    archive_date: Optional[datetime] = Field(None, description="Archive timestamp, null while active")
    goods: List[GoodResponseDto] = Field(default_factory=list, description="Goods in the payment")
