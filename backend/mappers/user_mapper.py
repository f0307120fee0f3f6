"""
User mapper.
"""

from typing import Optional

from domain.value_objects import UserRole
from dtos.request.user_request import UserRequestDto
from dtos.response.user_response import UserResponseDto
from mappers.good_mapper import enum_value
from mappers.payment_mapper import PaymentMapper
from models import User


class UserMapper:
    """Maps between User models and user DTOs. Passwords only flow inward."""

    def __init__(self, payment_mapper: Optional[PaymentMapper] = None):
        self.payment_mapper = payment_mapper or PaymentMapper()

    def to_user_response_dto(self, user: User, include_payments: bool = False) -> UserResponseDto:
        """
        Map a User to its response DTO.

        Args:
            user: User model
            include_payments: Whether to map the user's payments as well

        Returns:
            UserResponseDto without the password
        """
        payments = []
        if include_payments:
            payments = self.payment_mapper.to_payment_response_dtos(user.payments)

        return UserResponseDto(
            id=user.id,
            name=user.name,
            login=user.login,
            email=user.email,
            role=enum_value(user.role),
            archive_date=user.archive_date,
            payments=payments,
        )

    def to_user(self, request: UserRequestDto) -> User:
        """Build a transient User. id, timestamps and payments stay unset."""
        user = User()
        self.update_user_from_dto(request, user)
        return user

    def update_user_from_dto(self, request: UserRequestDto, user: User) -> None:
        user.name = request.name
        user.login = request.login
        user.password = request.password
        user.email = str(request.email)
        user.role = UserRole.from_string(request.role)
