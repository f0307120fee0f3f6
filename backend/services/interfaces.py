"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
Routers depend on these interfaces; dependencies.py wires the implementations.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from dtos.request import GoodRequestDto, PaymentRequestDto, UserRequestDto
from dtos.response import GoodResponseDto, PaymentResponseDto, UserResponseDto


class IGoodService(ABC):
    """
    Interface for good operations.
    """

    @abstractmethod
    def create_good(self, request: GoodRequestDto) -> GoodResponseDto:
        """
        Persist a new good.

        Args:
            request: Validated good fields

        Returns:
            The created good, with its id
        """
        pass

    @abstractmethod
    def get_good_by_id(self, good_id: int) -> GoodResponseDto:
        """
        Get a good by id.

        Raises:
            NotFoundError: If no good has this id
        """
        pass

    @abstractmethod
    def update_good_by_id(self, good_id: int, request: GoodRequestDto) -> GoodResponseDto:
        """
        Overwrite the business fields of a good.

        Raises:
            NotFoundError: If no good has this id
        """
        pass

    @abstractmethod
    def archive_good_by_id(self, good_id: int) -> GoodResponseDto:
        """
        Soft-delete a good by setting its archive date.

        Raises:
            NotFoundError: If no good has this id
        """
        pass

    @abstractmethod
    def get_archived_goods(self) -> List[GoodResponseDto]:
        """List all archived goods."""
        pass


class IPaymentService(ABC):
    """
    Interface for payment operations.
    """

    @abstractmethod
    def create_payment(self, request: PaymentRequestDto) -> PaymentResponseDto:
        """
        Create a payment for an existing user, linked to existing goods.

        Raises:
            NotFoundError: If the user or one of the goods does not exist
        """
        pass

    @abstractmethod
    def get_payment_by_id(self, payment_id: int) -> PaymentResponseDto:
        """See IGoodService.get_good_by_id"""
        pass

    @abstractmethod
    def update_payment_by_id(self, payment_id: int, request: PaymentRequestDto) -> PaymentResponseDto:
        """
        Overwrite the amount and the goods of a payment. The owning user never changes.

        Raises:
            NotFoundError: If the payment or one of the goods does not exist
        """
        pass

    @abstractmethod
    def archive_payment_by_id(self, payment_id: int) -> PaymentResponseDto:
        """
        Soft-delete a payment and unlink all of its goods.

        Raises:
            NotFoundError: If no payment has this id
        """
        pass

    @abstractmethod
    def get_payments_by_user_id(self, user_id: UUID) -> List[PaymentResponseDto]:
        """
        List the payments currently owned by a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass


class IUserService(ABC):
    """
    Interface for user operations.
    """

    @abstractmethod
    def create_user(self, request: UserRequestDto) -> UserResponseDto:
        pass

    @abstractmethod
    def get_user_by_id(self, user_id: UUID, include_payments: bool = False) -> UserResponseDto:
        """
        Get a user by id.

        Args:
            user_id: User UUID
            include_payments: Whether to include the user's payments

        Raises:
            NotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    def update_user_by_id(self, user_id: UUID, request: UserRequestDto) -> UserResponseDto:
        pass

    @abstractmethod
    def archive_user_by_id(self, user_id: UUID) -> UserResponseDto:
        """
        Soft-delete a user and detach all of its payments.

        Raises:
            NotFoundError: If no user has this id
        """
        pass
