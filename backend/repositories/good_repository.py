"""
Good repository for good-specific data access operations.
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from models import Good
from .base_repository import BaseRepository


class GoodRepository(BaseRepository[Good]):
    """Repository for Good model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Good)

    def get_by_name(self, name: str) -> Optional[Good]:
        """
        Find a good by its exact name.

        Names are not unique; the oldest matching good is returned.

        Args:
            name: Good name

        Returns:
            Good instance or None if not found
        """
        return self.db.query(self.model).filter(
            self.model.name == name
        ).order_by(self.model.id).first()

    def get_by_ids(self, ids: Iterable[int]) -> List[Good]:
        """
        Get all goods whose id is in ids. Unknown ids are skipped.

        Args:
            ids: Good ids

        Returns:
            List of goods ordered by id
        """
        ids = list(ids)
        if not ids:
            return []
        return self.db.query(self.model).filter(
            self.model.id.in_(ids)
        ).order_by(self.model.id).all()
