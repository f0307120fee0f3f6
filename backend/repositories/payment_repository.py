"""
Payment repository for payment-specific data access operations.
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from models import Payment
from .base_repository import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    """Repository for Payment model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Payment)

    def get_by_user_id(self, user_id: UUID | str) -> List[Payment]:
        """
        Get all payments owned by a user, with their goods eagerly loaded.

        Args:
            user_id: User UUID

        Returns:
            List of payments ordered by id (empty if none)
        """
        return self.db.query(self.model).options(
            selectinload(self.model.goods)
        ).filter(
            self.model.user_id == str(user_id)
        ).order_by(self.model.id).all()
