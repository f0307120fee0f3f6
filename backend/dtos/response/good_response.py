"""
Good Response DTOs

DTOs for good-related API responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dtos.base import CamelModel, Money


class GoodResponseDto(CamelModel):
    """
    Response DTO for good information.

    Also used inside PaymentRequestDto to reference goods, which is why id is
    optional here.
    """

    id: Optional[int] = Field(None, description="Good ID")
    name: str = Field(description="Good name")
    type: str = Field(description="Good type")
    description: str = Field(description="Good description")
    price: Money = Field(description="Unit price")
    stock_quantity: int = Field(description="Units in stock")
    archive_date: Optional[datetime] = Field(None, description="Archive timestamp, null while active")
