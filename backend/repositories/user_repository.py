"""
User repository for user-specific data access operations.
"""

from typing import Any, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_id(self, id: Any) -> Optional[User]:
        """
        Retrieve a user by id.

        Args:
            id: User UUID (UUID object or its string form)

        Returns:
            User instance or None if not found
        """
        if isinstance(id, UUID):
            id = str(id)
        return super().get_by_id(id)

    def exists(self, id: Any) -> bool:
        if isinstance(id, UUID):
            id = str(id)
        return super().exists(id)

    def get_by_login(self, login: str) -> Optional[User]:
        """Find a user by login."""
        return self.db.query(self.model).filter(self.model.login == login).first()

    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return self.db.query(self.model).filter(self.model.email == email).first()
