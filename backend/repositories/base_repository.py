"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Any
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import ConflictError, DatabaseError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Finders return None (or an empty list) on a miss; deciding whether a miss
    is an error is left to the services.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def get_all(self) -> List[T]:
        """
        Retrieve all records ordered by primary key.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_all_archived(self) -> List[T]:
        """
        Retrieve all soft-deleted records (archive_date is set).

        Returns:
            List of archived model instances
        """
        return self.db.query(self.model).filter(
            self.model.archive_date.isnot(None)
        ).order_by(self.model.id).all()

    def save(self, obj: T) -> T:
        """
        Insert or update a record and commit.

        New instances are inserted, persistent ones updated. The instance is
        refreshed afterwards so server-assigned fields (id, timestamps) are set.

        Args:
            obj: Model instance to persist

        Returns:
            The persisted instance

        Raises:
            ConflictError: If a unique constraint is violated
            DatabaseError: If the write fails for any other reason
        """
        try:
            self.db.add(obj)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error while saving {self.model.__name__}: {e.orig}")
            raise ConflictError(
                f"{self.model.__name__} violates a uniqueness or integrity constraint",
                operation="save"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("save", f"Failed to save {self.model.__name__}: {e}") from e

        self.db.refresh(obj)
        return obj

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def exists(self, id: Any) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model).filter(self.model.id == id).count() > 0
