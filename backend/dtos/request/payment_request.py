"""
Payment Request DTOs

DTOs for payment-related API requests.
"""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import Field

from dtos.base import CamelModel
from dtos.response.good_response import GoodResponseDto


class PaymentRequestDto(CamelModel):
    """
    Request DTO for creating or updating a payment.

    Goods are referenced by id; the other good fields are accepted so that a
    client can send back goods exactly as it received them. user_id is only
    read on creation.
    """

    user_id: UUID = Field(description="ID of the paying user")
    total_purchase_amount: Decimal = Field(
        gt=0,
        max_digits=12,
        decimal_places=2,
        description="Total amount, at most 10 integer and 2 fraction digits"
    )
    goods: List[GoodResponseDto] = Field(default_factory=list, description="Goods included in the payment")

    def good_ids(self) -> List[int]:
        """Distinct good ids in request order (None for a good sent without an id)."""
        return list(dict.fromkeys(good.id for good in self.goods))
