"""
Payment Service

Business logic for payments, including the bookkeeping of the
user-payment and payment-good associations.
"""

from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID
import logging

from constants import EntityNames
from dtos.request import PaymentRequestDto
from dtos.response import PaymentResponseDto
from exceptions import NotFoundError, ValidationError
from mappers import PaymentMapper
from models import Good, Payment, User
from repositories import GoodRepository, PaymentRepository, UserRepository
from services.interfaces import IPaymentService

logger = logging.getLogger(__name__)


class PaymentService(IPaymentService):
    """Service for payment-related business logic."""

    def __init__(
        self,
        payment_repo: PaymentRepository,
        user_repo: UserRepository,
        good_repo: GoodRepository,
        payment_mapper: Optional[PaymentMapper] = None
    ):
        """
        Initialize PaymentService.

        Args:
            payment_repo: Payment repository
            user_repo: User repository, to resolve the paying user
            good_repo: Good repository, to resolve referenced goods
            payment_mapper: Payment mapper (a default instance is created if omitted)
        """
        self.payment_repo = payment_repo
        self.user_repo = user_repo
        self.good_repo = good_repo
        self.payment_mapper = payment_mapper or PaymentMapper()

    def create_payment(self, request: PaymentRequestDto) -> PaymentResponseDto:
        logger.info(f"Creating payment for user id={request.user_id}, amount={request.total_purchase_amount}")

        # Resolve every reference before touching any association
        user = self._find_user_or_not_found(request.user_id)
        goods = self._resolve_goods(request.good_ids())

        payment = self.payment_mapper.to_payment(request)
        user.add_payment(payment)
        for good in goods:
            payment.add_good(good)

        self.payment_repo.save(payment)

        logger.info(f"Payment created with id={payment.id} ({len(goods)} good(s))")
        return self.payment_mapper.to_payment_response_dto(payment)

    def get_payment_by_id(self, payment_id: int) -> PaymentResponseDto:
        logger.info(f"Getting payment id={payment_id}")

        payment = self._find_payment_or_not_found(payment_id)
        logger.debug(f"Payment found: {payment!r}")

        return self.payment_mapper.to_payment_response_dto(payment)

    def update_payment_by_id(self, payment_id: int, request: PaymentRequestDto) -> PaymentResponseDto:
        logger.info(f"Updating payment id={payment_id}")

        payment = self._find_payment_or_not_found(payment_id)
        requested_goods = self._resolve_goods(request.good_ids())

        # user_id of the request is ignored: the owner is fixed at creation
        self.payment_mapper.update_payment_from_dto(request, payment)
        self._sync_goods(payment, requested_goods)

        self.payment_repo.save(payment)

        logger.info(f"Payment id={payment_id} updated")
        return self.payment_mapper.to_payment_response_dto(payment)

    def archive_payment_by_id(self, payment_id: int) -> PaymentResponseDto:
        logger.info(f"Archiving payment id={payment_id}")

        payment = self._find_payment_or_not_found(payment_id)

        # Iterate over a snapshot, remove_good mutates payment.goods
        for good in list(payment.goods):
            payment.remove_good(good)

        if payment.archive_date is None:
            payment.archive_date = datetime.utcnow()
        self.payment_repo.save(payment)

        logger.info(f"Payment id={payment_id} archived at {payment.archive_date}")
        return self.payment_mapper.to_payment_response_dto(payment)

    def get_payments_by_user_id(self, user_id: UUID) -> List[PaymentResponseDto]:
        logger.info(f"Getting payments of user id={user_id}")

        if not self.user_repo.exists(user_id):
            logger.error(f"User id={user_id} not found")
            raise NotFoundError(EntityNames.USER, user_id)

        payments = self.payment_repo.get_by_user_id(user_id)
        return [self.payment_mapper.to_payment_response_dto(payment) for payment in payments]

    def _sync_goods(self, payment: Payment, requested_goods: Iterable[Good]) -> None:
        """Make payment.goods equal to requested_goods, keeping both sides linked."""
        requested = set(requested_goods)

        for good in list(payment.goods):
            if good not in requested:
                payment.remove_good(good)

        for good in requested:
            payment.add_good(good)

    def _resolve_goods(self, good_ids: List[int]) -> List[Good]:
        """
        Load the goods referenced by a request.

        Raises:
            ValidationError: If a good was sent without an id
            NotFoundError: For the first id that does not resolve
        """
        if any(good_id is None for good_id in good_ids):
            logger.warning("Payment request references a good without an id")
            raise ValidationError(
                "Every good of a payment must reference an existing good id",
                invalid_fields={"goods": "id is required"}
            )

        goods = self.good_repo.get_by_ids(good_ids)
        found_ids = {good.id for good in goods}
        for good_id in good_ids:
            if good_id not in found_ids:
                logger.error(f"Good id={good_id} referenced by payment not found")
                raise NotFoundError(EntityNames.GOOD, good_id)
        return goods

    def _find_user_or_not_found(self, user_id: UUID) -> User:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            logger.error(f"User id={user_id} not found")
            raise NotFoundError(EntityNames.USER, user_id)
        logger.debug(f"User found: {user!r}")
        return user

    def _find_payment_or_not_found(self, payment_id: int) -> Payment:
        logger.debug(f"Looking up payment id={payment_id}")

        payment = self.payment_repo.get_by_id(payment_id)
        if payment is None:
            logger.error(f"Payment id={payment_id} not found")
            raise NotFoundError(EntityNames.PAYMENT, payment_id)
        return payment
