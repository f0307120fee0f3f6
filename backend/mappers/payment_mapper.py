"""
Payment mapper.
"""

from typing import Iterable, List, Optional

from dtos.request.payment_request import PaymentRequestDto
from dtos.response.payment_response import PaymentResponseDto
from mappers.good_mapper import GoodMapper
from models import Payment


class PaymentMapper:
    """
    Maps between Payment models and payment DTOs.

    The goods of a request are not mapped here: they are references that
    PaymentService resolves and links with Payment.add_good. The user link is
    likewise set by the service, and only on creation.
    """

    def __init__(self, good_mapper: Optional[GoodMapper] = None):
        self.good_mapper = good_mapper or GoodMapper()

    def to_payment_response_dto(self, payment: Payment) -> PaymentResponseDto:
        return PaymentResponseDto(
            id=payment.id,
            user_id=payment.user.id if payment.user is not None else None,
            total_purchase_amount=payment.total_purchase_amount,
            archive_date=payment.archive_date,
            goods=self.good_mapper.to_good_response_dtos(payment.goods),
        )

    def to_payment_response_dtos(self, payments: Iterable[Payment]) -> List[PaymentResponseDto]:
        dtos = [self.to_payment_response_dto(payment) for payment in payments]
        return sorted(dtos, key=lambda dto: dto.id or 0)

    def to_payment(self, request: PaymentRequestDto) -> Payment:
        """Build a transient Payment with no user and no goods."""
        payment = Payment()
        self.update_payment_from_dto(request, payment)
        return payment

    def update_payment_from_dto(self, request: PaymentRequestDto, payment: Payment) -> None:
        payment.total_purchase_amount = request.total_purchase_amount
