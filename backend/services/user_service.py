"""
User Service

Business logic for users: create, read (optionally with payments),
update and archive.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
import logging

from constants import EntityNames
from dtos.request import UserRequestDto
from dtos.response import UserResponseDto
from exceptions import NotFoundError
from mappers import UserMapper
from models import User
from repositories import UserRepository
from services.interfaces import IUserService

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, user_repo: UserRepository, user_mapper: Optional[UserMapper] = None):
        """
        Initialize UserService.

        Args:
            user_repo: User repository
            user_mapper: User mapper (a default instance is created if omitted)
        """
        self.user_repo = user_repo
        self.user_mapper = user_mapper or UserMapper()

    def create_user(self, request: UserRequestDto) -> UserResponseDto:
        # Never log the request itself, it carries the password
        logger.info(f"Creating user with login={request.login!r}")

        user = self.user_mapper.to_user(request)
        self.user_repo.save(user)

        logger.info(f"User created with id={user.id}")
        return self.user_mapper.to_user_response_dto(user)

    def get_user_by_id(self, user_id: UUID, include_payments: bool = False) -> UserResponseDto:
        logger.info(f"Getting user id={user_id}, include_payments={include_payments}")

        user = self._find_user_or_not_found(user_id)
        logger.debug(f"User found: {user!r}")

        return self.user_mapper.to_user_response_dto(user, include_payments=include_payments)

    def update_user_by_id(self, user_id: UUID, request: UserRequestDto) -> UserResponseDto:
        logger.info(f"Updating user id={user_id}")

        user = self._find_user_or_not_found(user_id)
        self.user_mapper.update_user_from_dto(request, user)
        self.user_repo.save(user)

        logger.info(f"User id={user_id} updated")
        return self.user_mapper.to_user_response_dto(user)

    def archive_user_by_id(self, user_id: UUID) -> UserResponseDto:
        logger.info(f"Archiving user id={user_id}")

        user = self._find_user_or_not_found(user_id)

        # Iterate over a snapshot, remove_payment mutates user.payments
        payments = list(user.payments)
        for payment in payments:
            user.remove_payment(payment)

        if user.archive_date is None:
            user.archive_date = datetime.utcnow()
        self.user_repo.save(user)

        logger.info(f"User id={user_id} archived at {user.archive_date}, {len(payments)} payment(s) detached")
        return self.user_mapper.to_user_response_dto(user)

    def _find_user_or_not_found(self, user_id: UUID) -> User:
        logger.debug(f"Looking up user id={user_id}")

        user = self.user_repo.get_by_id(user_id)
        if user is None:
            logger.error(f"User id={user_id} not found")
            raise NotFoundError(EntityNames.USER, user_id)
        return user
